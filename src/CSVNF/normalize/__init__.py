"""
Normal-form recommendation for loaded tables.
"""

from .recommender import (
    NormalFormRecommender,
    RECOMMENDERS,
    register_recommender,
    available_recommenders,
    get_recommender,
)

__all__ = [
    "NormalFormRecommender", "RECOMMENDERS", "register_recommender",
    "available_recommenders", "get_recommender",
]

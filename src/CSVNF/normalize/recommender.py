"""
Second-normal-form recommendation capability.

A recommender inspects a freshly loaded table for partial functional
dependencies (non-key columns that depend on only part of a composite key)
and returns a SQL script that splits the table and adds foreign keys.

No recommender is registered. Asking for one by name raises
RecommenderNotAvailableError instead of producing an empty script.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Protocol, Type, runtime_checkable

from CSVNF.core.logging_config import get_logger
from CSVNF.core.exceptions import RecommenderNotAvailableError
from CSVNF.etl.db import StatementExecutor

logger = get_logger(__name__)


@runtime_checkable
class NormalFormRecommender(Protocol):
    def recommend_update(self, executor: StatementExecutor, table: str) -> str:
        """Return a SQL script that rewrites `table` into second normal form."""
        ...


RECOMMENDERS: Dict[str, Type[NormalFormRecommender]] = {}


def register_recommender(name: str) -> Callable[[Type[NormalFormRecommender]], Type[NormalFormRecommender]]:
    """Class decorator adding a recommender to the registry under `name`."""
    def decorator(cls: Type[NormalFormRecommender]) -> Type[NormalFormRecommender]:
        if name in RECOMMENDERS:
            raise ValueError(f"Recommender already registered: {name}")
        RECOMMENDERS[name] = cls
        logger.debug("Registered recommender %s -> %s", name, cls.__name__)
        return cls
    return decorator


def available_recommenders() -> List[str]:
    return sorted(RECOMMENDERS)


def get_recommender(name: str) -> NormalFormRecommender:
    try:
        cls = RECOMMENDERS[name]
    except KeyError:
        raise RecommenderNotAvailableError(
            f"No normal-form recommender registered as '{name}'",
            {"requested": name, "available": available_recommenders()},
        ) from None
    return cls()

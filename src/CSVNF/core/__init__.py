"""
Core configuration, logging and exceptions.
"""

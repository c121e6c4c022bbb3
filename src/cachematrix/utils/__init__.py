"""
Configuration and logging helpers for cachematrix.
"""

from .config import CacheConfig, SolverParameters
from .log import setup_logging

__all__ = ["CacheConfig", "SolverParameters", "setup_logging"]

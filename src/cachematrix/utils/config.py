"""
Configuration for inverse caching behavior.

Settings come from CACHEMATRIX_* environment variables. If
CACHEMATRIX_CONFIG_FILE names a YAML file, its keys override them.
"""

import functools
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Union

import yaml

logger = logging.getLogger(__name__)


class CacheConfig:
    """Environment-driven defaults for cache behavior."""

    CACHE_ENABLED = os.environ.get("CACHEMATRIX_CACHE_ENABLED", "1") == "1"
    LOG_CACHE_HITS = os.environ.get("CACHEMATRIX_LOG_CACHE_HITS", "1") == "1"
    LOG_LEVEL = os.environ.get("CACHEMATRIX_LOG_LEVEL", "WARNING")
    CONFIG_FILE = os.environ.get("CACHEMATRIX_CONFIG_FILE")


@dataclass
class SolverParameters:
    """Parameters controlling how cache_solve uses the cell's cache"""

    cache_enabled: bool = True
    log_cache_hits: bool = True  # INFO when true, DEBUG otherwise

    @classmethod
    def from_env(cls) -> 'SolverParameters':
        """Builds parameters from CacheConfig, then applies CacheConfig.CONFIG_FILE if set."""
        params = cls(
            cache_enabled=CacheConfig.CACHE_ENABLED,
            log_cache_hits=CacheConfig.LOG_CACHE_HITS,
        )
        if CacheConfig.CONFIG_FILE:
            params = params.updated_from_yaml(CacheConfig.CONFIG_FILE)
        return params

    def updated_from_yaml(self, filepath: Union[str, Path]) -> 'SolverParameters':
        """
        Return a copy with the settings of a YAML mapping applied.

        Keys that are not parameters are logged and ignored; parameters the
        file does not mention keep their current value.
        """
        settings = _read_settings(str(Path(filepath)))
        known = {f.name for f in fields(self)}
        unknown = sorted(set(settings) - known)
        if unknown:
            logger.warning(f"Ignoring unknown solver settings in {filepath}: {', '.join(unknown)}")
        return replace(self, **{k: v for k, v in settings.items() if k in known})


@functools.lru_cache(maxsize=None)
def _read_settings(filepath: str) -> Dict[str, Any]:
    # Read once per path; cache_solve consults the parameters on every call.
    path = Path(filepath)
    if not path.exists():
        logger.error(f"Solver config file not found: {path}")
        raise FileNotFoundError(f"Solver config file not found: {path}")
    with open(path, 'r') as f:
        settings = yaml.safe_load(f) or {}
    if not isinstance(settings, dict):
        logger.error(f"Solver config file {path} does not hold a mapping")
        raise ValueError(f"expected a mapping of settings in {path}, got {type(settings).__name__}")
    logger.debug(f"Loaded solver settings from {path}")
    return settings

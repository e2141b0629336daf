"""
YAML run configuration for the csvframe report.
"""
import logging
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import yaml

from csvframe.exceptions import ConfigValidationError
from csvframe.views import DEFAULT_VIEW_ROWS

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class RunConfig:
    source: str
    delimiter: str = ','
    detailed: bool = False
    head_rows: int = DEFAULT_VIEW_ROWS
    sample_rows: int = DEFAULT_VIEW_ROWS
    seed: Optional[int] = None
    max_rows: Optional[int] = None
    max_columns: Optional[int] = None
    encoding: str = 'utf-8-sig'
    log_level: str = 'INFO'

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> 'RunConfig':
        validate_config(config)
        return cls(**config)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper())


def validate_config(config):
    if not isinstance(config, dict):
        raise ConfigValidationError(f"Config must be a mapping, got {type(config).__name__}")
    required_keys = ['source']
    missing = [k for k in required_keys if k not in config]
    if missing:
        raise ConfigValidationError(f"Missing required config keys: {missing}")
    known = {f.name for f in fields(RunConfig)}
    unknown = sorted(k for k in config if k not in known)
    if unknown:
        raise ConfigValidationError(f"Unknown config keys: {unknown}")
    if not isinstance(config['source'], str) or not config['source']:
        raise ConfigValidationError("'source' must be a non-empty path")
    if 'delimiter' in config and (not isinstance(config['delimiter'], str) or not config['delimiter']):
        raise ConfigValidationError("'delimiter' must be a non-empty string")
    for key in ('head_rows', 'sample_rows'):
        if key in config and not _is_count(config[key]):
            raise ConfigValidationError(f"'{key}' must be a non-negative integer, got {config[key]!r}")
    for key in ('max_rows', 'max_columns'):
        if config.get(key) is not None and not _is_count(config[key]):
            raise ConfigValidationError(f"'{key}' must be a non-negative integer or null, got {config[key]!r}")
    if config.get('seed') is not None and not _is_count(config['seed']):
        raise ConfigValidationError(f"'seed' must be a non-negative integer or null, got {config['seed']!r}")
    if 'detailed' in config and not isinstance(config['detailed'], bool):
        raise ConfigValidationError(f"'detailed' must be true or false, got {config['detailed']!r}")
    if 'log_level' in config and str(config['log_level']).upper() not in LOG_LEVELS:
        raise ConfigValidationError(f"'log_level' must be one of {list(LOG_LEVELS)}, got {config['log_level']!r}")


def _is_count(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def load_config(path: str) -> RunConfig:
    """Read a YAML file and return a validated RunConfig."""
    with open(path, 'r') as f:
        config = yaml.safe_load(f) or {}
    return RunConfig.from_dict(config)

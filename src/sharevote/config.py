"""Classifier configuration with environment overrides."""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class ClassifierConfig:
    """Knobs for one classification run.

    workers: processes used to tally combinations; 1 runs in-process.
    chunk_size: combinations handed to a worker at a time.
    strict: a duplicate x aborts the run when True, and only skips the
        offending combination when False.
    log_level: level name passed to logging by the command-line tool.
    """
    workers: int = 1
    chunk_size: int = 256
    strict: bool = True
    log_level: str = 'WARNING'

    def __post_init__(self):
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {self.chunk_size}")
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls, environ=None) -> 'ClassifierConfig':
        """Build a config from SHAREVOTE_* environment variables."""
        env = os.environ if environ is None else environ
        config = cls(
            workers=_env_int(env, 'SHAREVOTE_WORKERS', 1),
            chunk_size=_env_int(env, 'SHAREVOTE_CHUNK_SIZE', 256),
            strict=env.get('SHAREVOTE_STRICT', '1') != '0',
            log_level=env.get('SHAREVOTE_LOG_LEVEL', 'WARNING'),
        )
        logger.debug("Config from environment: %s", config)
        return config

    def replace(self, **overrides) -> 'ClassifierConfig':
        """Copy with the non-None overrides applied."""
        values = {
            'workers': self.workers,
            'chunk_size': self.chunk_size,
            'strict': self.strict,
            'log_level': self.log_level,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ClassifierConfig(**values)


def _env_int(env, name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None

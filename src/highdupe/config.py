# src/highdupe/config.py

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

Scope = Literal["line", "paragraph"]


class ExcludeWordsSettings(BaseModel):
    use_defaults: bool = True
    global_words: list[str] = Field(default_factory=list)
    project_words: list[str] = Field(default_factory=list)

    class Config:
        extra = "forbid"


class DuplicateWordSettings(BaseModel):
    enabled: bool = True
    scope: Scope = "paragraph"
    exclude_words: ExcludeWordsSettings = Field(default_factory=ExcludeWordsSettings)

    class Config:
        extra = "forbid"


class HighDupeConfig(BaseModel):
    """Settings supplied by the host editor or a YAML file.

    ``check_interval_ms`` is only read by the scheduler; the analyzer itself
    never starts timers.
    """

    check_interval_ms: int = Field(default=3000, gt=0)
    duplicate_word: DuplicateWordSettings = Field(
        default_factory=DuplicateWordSettings
    )

    class Config:
        extra = "forbid"


def load_config(path: str | Path) -> HighDupeConfig:
    """Load configuration from a YAML file.

    A missing, unreadable or invalid file is logged and replaced by the
    defaults, so a broken settings file never stops analysis.
    """
    logger.info("Loading configuration from %s", path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
        return HighDupeConfig.model_validate(data or {})
    except (OSError, yaml.YAMLError, ValidationError) as exc:
        logger.error("Invalid configuration in %s, using defaults: %s", path, exc)
        return HighDupeConfig()

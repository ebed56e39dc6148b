"""
YAML configuration for socialgraph ingestion and logging.

Example::

    ingestion:
      max_workers: 4
      encoding: utf-8
    logging:
      level: INFO
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional
import logging


@dataclass(frozen=True)
class IngestionConfig:
    max_workers: Optional[int] = None  # None -> executor default
    encoding: str = "utf-8"


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


@dataclass(frozen=True)
class Config:
    ingestion: IngestionConfig = field(default_factory=IngestionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def default_config() -> Config:
    return Config()


def load_config(path: Path) -> Config:
    """
    Read a YAML config file. Missing sections and keys keep their defaults.
    """
    import yaml  # type: ignore

    data = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return config_from_mapping(data)


def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, Mapping):
        raise ValueError(f"{name}: expected a mapping")
    return section


def config_from_mapping(data: Mapping[str, Any]) -> Config:
    ingestion = _section(data, "ingestion")
    log_section = _section(data, "logging")

    max_workers = ingestion.get("max_workers")
    if max_workers is not None:
        max_workers = int(max_workers)
        if max_workers <= 0:
            raise ValueError("ingestion.max_workers must be positive")

    level = str(log_section.get("level", LoggingConfig.level)).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"logging.level: unknown level {level!r}")

    return Config(
        ingestion=IngestionConfig(
            max_workers=max_workers,
            encoding=str(ingestion.get("encoding", IngestionConfig.encoding)),
        ),
        logging=LoggingConfig(level=level),
    )

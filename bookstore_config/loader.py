"""
Configuration Loader (``bookstore_config.loader``).

Responsibility
--------------
Loads YAML files and parses them into the frozen dataclasses of
``bookstore_config.schema``.  Runtime callers go through
``bookstore_config.get_active_config()`` instead of calling this directly.

Invariants enforced
-------------------
* Every parsed object is a frozen dataclass from ``schema.py``.
* A later fragment overrides only the keys it names; sections and keys it
  omits keep their earlier values.
* Backend and log level are checked against fixed vocabularies at parse
  time, not when first used.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Unknown section, backend or level  -> ``ConfigError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from bookstore_config.schema import (
    LOG_LEVELS,
    STORAGE_BACKENDS,
    BookstoreConfig,
    BootstrapConfig,
    LoggingConfig,
    StorageConfig,
)
from bookstore_kernel.exceptions import ConfigError

_SECTIONS = ("storage", "logging", "bootstrap")


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ConfigError: if the top level is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(str(path), "top level must be a mapping")
    return data


def merge_fragments(*fragments: dict[str, Any]) -> dict[str, Any]:
    """Overlay fragments section by section, later ones winning per key."""
    merged: dict[str, dict[str, Any]] = {name: {} for name in _SECTIONS}
    for fragment in fragments:
        for section, values in fragment.items():
            if section not in merged:
                raise ConfigError(section, "unknown configuration section")
            if values is None:
                continue
            if not isinstance(values, dict):
                raise ConfigError(section, "section must be a mapping")
            merged[section].update(values)
    return merged


def parse_storage(data: dict[str, Any]) -> StorageConfig:
    backend = str(data.get("backend", "tsv")).lower()
    if backend not in STORAGE_BACKENDS:
        raise ConfigError("storage.backend", f"expected one of {STORAGE_BACKENDS}, got {backend!r}")
    return StorageConfig(
        backend=backend,
        data_dir=Path(data.get("data_dir") or ".data"),
        database_url=data.get("database_url") or None,
    )


def parse_logging(data: dict[str, Any]) -> LoggingConfig:
    level = str(data.get("level", "WARNING")).upper()
    if level not in LOG_LEVELS:
        raise ConfigError("logging.level", f"expected one of {LOG_LEVELS}, got {level!r}")
    log_file = data.get("file")
    return LoggingConfig(level=level, file=Path(log_file) if log_file else None)


def parse_bootstrap(data: dict[str, Any]) -> BootstrapConfig:
    defaults = BootstrapConfig()
    return BootstrapConfig(
        root_user_id=str(data.get("root_user_id", defaults.root_user_id)),
        root_password=str(data.get("root_password", defaults.root_password)),
        root_username=str(data.get("root_username", defaults.root_username)),
    )


def parse_config(data: dict[str, Any]) -> BookstoreConfig:
    """Parse a merged configuration dict into a ``BookstoreConfig``."""
    return BookstoreConfig(
        storage=parse_storage(data.get("storage") or {}),
        logging=parse_logging(data.get("logging") or {}),
        bootstrap=parse_bootstrap(data.get("bootstrap") or {}),
    )

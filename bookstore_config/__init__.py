"""
bookstore_config -- single public entrypoint for bookstore configuration.

Responsibility:
    ``get_active_config()`` is the only way the process obtains its
    configuration.  It loads the packaged ``defaults.yaml``, overlays an
    optional user file, and returns a frozen ``BookstoreConfig``.

Architecture position:
    Configuration.  Sits beside ``bookstore_kernel``; only the shell entry
    point imports it.  The stores and commands receive already-built
    collaborators and never see configuration.

Failure modes:
    - ``FileNotFoundError`` -- a user file was named but does not exist.
    - ``yaml.YAMLError`` -- the file is not valid YAML.
    - ``ConfigError`` -- unknown section, backend or log level.
"""

from __future__ import annotations

import logging
from pathlib import Path

from bookstore_config.loader import load_yaml_file, merge_fragments, parse_config
from bookstore_config.schema import (
    BookstoreConfig,
    BootstrapConfig,
    LoggingConfig,
    StorageConfig,
)

_logger = logging.getLogger("bookstore_kernel.config")

DEFAULTS_FILE = Path(__file__).parent / "defaults.yaml"

__all__ = [
    "BookstoreConfig",
    "BootstrapConfig",
    "DEFAULTS_FILE",
    "LoggingConfig",
    "StorageConfig",
    "get_active_config",
]


def get_active_config(path: Path | str | None = None) -> BookstoreConfig:
    """
    Build the active configuration.

    Args:
        path: Optional user YAML file overlaid on the packaged defaults.

    Raises:
        FileNotFoundError: If ``path`` is given and does not exist.
        ConfigError: If a value is outside its allowed vocabulary.
    """
    fragments = [load_yaml_file(DEFAULTS_FILE)]
    if path is not None:
        fragments.append(load_yaml_file(Path(path)))

    config = parse_config(merge_fragments(*fragments))
    _logger.debug(
        "config_loaded",
        extra={
            "source": str(path) if path is not None else "defaults",
            "backend": config.storage.backend,
            "data_dir": str(config.storage.data_dir),
        },
    )
    return config

"""
pharmacy_config -- single public entrypoint for runtime configuration.

Responsibility:
    Provides the ONLY way to obtain configuration at runtime through
    ``get_active_config()``.  Module code (pricing, stock) receives its
    settings from the returned ``PharmacyConfig``; it never reads files or
    hardcodes rates.

Failure modes:
    - ``FileNotFoundError`` -- the requested configuration file is missing.
    - ``KeyError`` / ``ValueError`` -- structural or validation failures.
    - ``yaml.YAMLError`` -- the file is not valid YAML.

Audit relevance:
    Every successful ``get_active_config()`` call emits a
    ``PHARMACY_CONFIG_TRACE`` log entry with the config id, version and
    checksum, tying every priced sale to the configuration that governed it.
"""

from __future__ import annotations

from pathlib import Path

from pharmacy_config.loader import load_yaml_file, parse_config
from pharmacy_config.schema import PharmacyConfig
from pharmacy_kernel.logging_config import get_logger

_logger = get_logger("config")

DEFAULT_CONFIG_PATH = Path(__file__).parent / "sets" / "default.yaml"


def get_active_config(config_path: Path | str | None = None) -> PharmacyConfig:
    """The ONLY public configuration entrypoint.

    Args:
        config_path: YAML file to load. Defaults to the bundled
            ``sets/default.yaml``.

    Returns:
        A validated, frozen ``PharmacyConfig``.
    """
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    config = parse_config(load_yaml_file(path))

    _logger.info(
        "PHARMACY_CONFIG_TRACE",
        extra={
            "config_id": config.config_id,
            "config_version": config.version,
            "config_checksum": config.checksum,
            "config_path": str(path),
            "currency": config.currency,
            "tax_rate": str(config.tax_rate),
        },
    )
    return config


__all__ = ["DEFAULT_CONFIG_PATH", "PharmacyConfig", "get_active_config"]

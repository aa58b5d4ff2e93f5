"""
Configuration Loader (``pharmacy_config.loader``).

Responsibility
--------------
Loads a YAML configuration file and parses it into a ``PharmacyConfig``.
Runtime callers go through ``pharmacy_config.get_active_config()``; this
module is the parsing machinery behind it.

Invariants enforced
-------------------
* Numeric values become ``Decimal`` via ``str()``; YAML floats never feed
  into money arithmetic directly.
* Missing required keys raise ``KeyError``; invalid values raise
  ``ValueError`` (from ``PharmacyConfig`` validation).
* ``compute_checksum`` is deterministic for identical input.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
"""

from __future__ import annotations

import hashlib
import json
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml

from pharmacy_config.schema import PharmacyConfig


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if the top-level document is not a mapping.
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration root must be a mapping: {path}")
    return data


def parse_decimal(value: Any, field_name: str) -> Decimal:
    """Parse a Decimal from a YAML scalar (string, int or float)."""
    if isinstance(value, bool):
        raise ValueError(f"{field_name} must be numeric, got {value!r}")
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"{field_name} must be numeric, got {value!r}") from e


def parse_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{field_name} must be an integer, got {value!r}")
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{field_name} must be an integer, got {value!r}") from e


def parse_config(data: dict[str, Any]) -> PharmacyConfig:
    """
    Parse a ``PharmacyConfig`` from a dict.

    Expected shape::

        config_id: default
        version: 1
        currency: USD
        sales:
          tax_rate: "0.15"
          bulk_discount_threshold: "1000"
          bulk_discount_rate: "0.10"
          transaction_prefix: TXN
        inventory:
          default_reorder_level: 50
          default_reorder_quantity: 100
          low_stock_threshold: 20
        prescriptions:
          prefix: RX

    Raises:
        KeyError: if a required key is missing.
        ValueError: if a value is malformed or fails validation.
    """
    sales = data["sales"]
    inventory = data["inventory"]
    prescriptions = data.get("prescriptions", {})

    return PharmacyConfig(
        config_id=str(data["config_id"]),
        version=parse_int(data.get("version", 1), "version"),
        currency=str(data.get("currency", "USD")).strip().upper(),
        tax_rate=parse_decimal(sales["tax_rate"], "sales.tax_rate"),
        default_reorder_level=parse_int(
            inventory.get("default_reorder_level", 50), "inventory.default_reorder_level"
        ),
        default_reorder_quantity=parse_int(
            inventory.get("default_reorder_quantity", 100), "inventory.default_reorder_quantity"
        ),
        low_stock_threshold=parse_int(
            inventory.get("low_stock_threshold", 20), "inventory.low_stock_threshold"
        ),
        bulk_discount_threshold=parse_decimal(
            sales.get("bulk_discount_threshold", "1000"), "sales.bulk_discount_threshold"
        ),
        bulk_discount_rate=parse_decimal(
            sales.get("bulk_discount_rate", "0.10"), "sales.bulk_discount_rate"
        ),
        transaction_prefix=str(sales.get("transaction_prefix", "TXN")),
        prescription_prefix=str(prescriptions.get("prefix", "RX")),
        checksum=compute_checksum(data),
    )


def compute_checksum(data: dict[str, Any]) -> str:
    """SHA-256 checksum of the canonical JSON serialization of ``data``."""
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()

"""Test helpers: sample identifiers and config fixtures."""

from __future__ import annotations

from pathlib import Path

UUID = "550e8400-e29b-41d4-a716-446655440000"
ULID = "01ARZ3NDEKTSV4RRFFQ69G5FAV"
CUID = "clh3am1g30000udocl363eofy"
CUID2 = "tz4a98xxat96iws9zmbrgj3a"
NANOID = "V1StGXR8_Z5jdHi6B-myT"


def write_config(tmp_path: Path, body: str, name: str = "pathgroup.yaml") -> Path:
    """Write a YAML config file and return its path."""
    config_path = tmp_path / name
    config_path.write_text(body, encoding="utf-8")
    return config_path

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

# BLAKE2b accepts keys of at most 64 bytes.
MAX_SEED_BYTES = 64


@dataclass(frozen=True, slots=True)
class MarkerConfig:
    """Configuration options for marking unintelligible words."""

    open_marker: str = "["
    close_marker: str = "]"
    seed: str = ""

    def __post_init__(self) -> None:
        if not self.open_marker or not self.close_marker:
            raise ValueError("Markers must be non-empty strings.")
        if len(self.seed.encode("utf-8")) > MAX_SEED_BYTES:
            raise ValueError(f"Seed must encode to at most {MAX_SEED_BYTES} bytes.")

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary representation of the configuration."""
        return dict(asdict(self))


def config_from_dict(data: Mapping[str, Any] | None) -> MarkerConfig:
    """
    Build a MarkerConfig from a dictionary-like input.

    Unknown keys are ignored. Keys left empty (``None``, e.g. ``seed:`` in
    YAML) keep their default value; everything else is coerced to ``str``.
    """
    allowed = {field.name for field in fields(MarkerConfig)}
    overrides = {
        key: str(value)
        for key, value in (data or {}).items()
        if key in allowed and value is not None
    }
    return MarkerConfig(**overrides)


def config_from_yaml(path: str | Path) -> MarkerConfig:
    """Load marker settings from a YAML mapping; an empty file yields defaults."""
    parsed = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if parsed is None:
        return MarkerConfig()
    if not isinstance(parsed, MutableMapping):
        raise ValueError(f"Configuration YAML at {path} must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> MarkerConfig:
    """Read ``path`` when given; without one the default brackets apply."""
    return MarkerConfig() if path is None else config_from_yaml(path)

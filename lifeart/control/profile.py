"""Settings resolution: variant presets plus optional JSON profiles."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Mapping, Optional

from lifeart.control.config import DEFAULTS, VARIANTS

__all__ = ["coerce_float", "coerce_int", "load_profile", "merge_state", "resolve_settings"]


def coerce_float(value: object, default: float = 0.0) -> float:
    """Return ``value`` converted to ``float`` when possible."""

    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value))
    except (TypeError, ValueError):
        return default


def coerce_int(value: object, default: int = 0) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(float(str(value)))
    except (TypeError, ValueError):
        return default


def merge_state(base: dict, payload: Mapping[str, object]) -> dict:
    """Merge ``payload`` into ``base`` in place and return ``base``.

    Mappings are merged key by key, any other value replaces the existing one.
    """

    for key, value in payload.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merge_state(current, value)
        else:
            base[key] = copy.deepcopy(value)
    return base


def load_profile(path: Path | str) -> dict:
    """Read a JSON profile. Raises ``ValueError`` when it cannot be used."""

    profile_path = Path(path)
    try:
        raw = json.loads(profile_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ValueError(f"cannot read profile {profile_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid json in profile {profile_path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"profile {profile_path} must contain a JSON object")
    return raw


def resolve_settings(variant: str, overrides: Optional[Mapping[str, object]] = None) -> dict:
    if variant not in VARIANTS:
        known = ", ".join(sorted(VARIANTS))
        raise ValueError(f"unknown variant {variant!r} (expected one of: {known})")
    settings = copy.deepcopy(DEFAULTS)
    merge_state(settings, VARIANTS[variant])
    if overrides:
        merge_state(settings, overrides)
    settings["variant"] = variant
    return settings

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..core.exceptions import ValidationError


def require_fields(payload: Mapping[str, Any], fields: Sequence[str]) -> None:
    """Reject the payload when any field is absent or falsy."""
    missing = [f for f in fields if not payload.get(f)]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def first_present(payload: Mapping[str, Any], *keys: str) -> Any:
    """Return the first truthy value among aliased keys (e.g. firstname/firstName)."""
    for key in keys:
        value = payload.get(key)
        if value:
            return value
    return None


def apply_defaults(record: dict, defaults: Mapping[str, Any]) -> dict:
    """Fill missing values (`None` or empty string) from a defaults table.

    Returns a new dict; `False` and `0` count as supplied.
    """
    out = dict(record)
    for key, default in defaults.items():
        if out.get(key) is None or out.get(key) == "":
            out[key] = default
    return out

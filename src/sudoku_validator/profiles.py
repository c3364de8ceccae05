"""Validation profiles (classic/strict)."""

from __future__ import annotations


from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ProfileConfig:
    """Profile toggles that govern how the checks treat cell ranges.

    ``classic`` trusts the row pass to have rejected out-of-range values, so
    the column and sub-block passes only look for repeats.  ``strict`` range
    checks in every pass, which matters when those passes are called on their
    own.
    """

    name: str
    range_in_columns: bool = False
    range_in_submatrices: bool = False


_PROFILES: Dict[str, ProfileConfig] = {
    "classic": ProfileConfig(name="classic"),
    "strict": ProfileConfig(
        name="strict",
        range_in_columns=True,
        range_in_submatrices=True,
    ),
}


def get_profile(name: str | None) -> ProfileConfig:
    """Return the profile matching *name* (defaults to ``classic``)."""

    if not name:
        name = "classic"
    key = name.lower()
    if key not in _PROFILES:
        raise ValueError(f"Unknown validation profile: {name}")
    return _PROFILES[key]


__all__ = ["ProfileConfig", "get_profile"]

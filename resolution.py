"""
Tagged results for input resolution.

Every input the calculator resolves (ET0, Kc, system efficiency) reports
whether it came from real data, was replaced by a documented default, or
could not be resolved at all.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Resolved:
    """Value taken from caller-supplied or reference data."""
    value: Any
    source: str


@dataclass(frozen=True)
class Defaulted:
    """Documented fallback used in place of missing data."""
    value: Any
    reason: str


@dataclass(frozen=True)
class Missing:
    """No usable value and no fallback allowed."""
    reason: str


Resolution = Union[Resolved, Defaulted, Missing]


def is_usable(resolution: Resolution) -> bool:
    return not isinstance(resolution, Missing)


def describe(resolution: Resolution) -> str:
    """One-line label for logs and result payloads."""
    if isinstance(resolution, Resolved):
        return f"resolved from {resolution.source}"
    if isinstance(resolution, Defaulted):
        return f"defaulted: {resolution.reason}"
    return f"missing: {resolution.reason}"

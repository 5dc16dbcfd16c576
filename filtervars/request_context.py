"""Immutable per-request context carrying the values variables read from."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from typing import Any, Mapping


class _Unset(enum.Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset.UNSET
"""Marker for a context field that was never set."""

FIELDS = (
    "ip",
    "channel",
    "device",
    "platform",
    "referer",
    "ua",
    "uid",
    "user_tag",
    "version",
)


@dataclass(frozen=True)
class RequestContext:
    """Request-scoped values; every change produces a new context."""

    ip: Any = UNSET
    channel: Any = UNSET
    device: Any = UNSET
    platform: Any = UNSET
    referer: Any = UNSET
    ua: Any = UNSET
    uid: Any = UNSET
    user_tag: Any = UNSET
    version: Any = UNSET
    values: Mapping[Any, Any] = field(default_factory=dict)

    def with_value(self, key: Any, value: Any) -> RequestContext:
        """Return a copy holding ``value`` under the custom ``key``."""
        merged = dict(self.values)
        merged[key] = value
        return dataclasses.replace(self, values=merged)

    def lookup(self, key: Any) -> Any:
        """Return the custom value stored under ``key``, or None."""
        return self.values.get(key)

    def replace(self, **kwargs: Any) -> RequestContext:
        """Return a copy with the given fields changed."""
        unknown = set(kwargs) - set(FIELDS) - {"values"}
        if unknown:
            raise TypeError(f"unknown context fields: {', '.join(sorted(unknown))}")
        if "values" in kwargs:
            kwargs["values"] = dict(kwargs["values"])
        return dataclasses.replace(self, **kwargs)
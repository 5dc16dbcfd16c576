"""Variables that read from the data passed in with a request."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, MutableMapping, Optional

from filtervars.registry import (
    Builder,
    Frequency,
    Valuer,
    Variable,
    VariableError,
    register,
)

DATA_PREFIX = "data."
FREQ_PREFIX = "freq."


def _is_index(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def _attribute(obj: Any, segment: str) -> Any:
    if not segment or segment.startswith("_"):
        raise KeyError(segment)
    try:
        attrs = vars(obj)
    except TypeError:
        attrs = {}
    if segment in attrs:
        return attrs[segment]
    for klass in type(obj).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        if segment in slots:
            try:
                return getattr(obj, segment)
            except AttributeError:
                break
    raise KeyError(segment)


def _step(obj: Any, segment: str) -> Any:
    if obj is None:
        raise KeyError(segment)
    if isinstance(obj, Mapping):
        if segment in obj:
            return obj[segment]
        if _is_index(segment) and int(segment) in obj:
            return obj[int(segment)]
        raise KeyError(segment)
    if isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray)):
        if not _is_index(segment):
            raise KeyError(segment)
        index = int(segment)
        if index >= len(obj):
            raise KeyError(segment)
        return obj[index]
    return _attribute(obj, segment)


def lookup(obj: Any, key: str) -> Any:
    """Follow a dotted ``key`` through mappings, sequences and object fields.

    Raises KeyError when any segment of the path cannot be resolved.
    """
    current = obj
    for segment in key.split("."):
        current = _step(current, segment)
    return current


class Data(Variable):
    """Reads a value out of the request data by a dotted key."""

    cacheable = False

    def __init__(self, name: str, key: str) -> None:
        self.name = name
        self.key = key

    def value(self, ctx: Any, data: Any, cache: Optional[MutableMapping[str, Any]]) -> Any:
        if isinstance(data, Valuer) and callable(getattr(data, "value", None)):
            return data.value(ctx, self.key)
        try:
            return lookup(data, self.key)
        except KeyError:
            raise VariableError(f"{self.name} not found in data") from None


class DataBuilder(Builder):
    """Builds ``data.<key>`` variables."""

    name = DATA_PREFIX

    def build(self, name: str) -> Optional[Data]:
        key = name[len(DATA_PREFIX):] if name.startswith(DATA_PREFIX) else name
        if not key:
            return None
        return Data(name, key)


class Freq(Variable):
    """Asks the request data for a frequency counter."""

    cacheable = False

    def __init__(self, name: str, key: str) -> None:
        self.name = name
        self.key = key

    def value(self, ctx: Any, data: Any, cache: Optional[MutableMapping[str, Any]]) -> Any:
        if isinstance(data, Frequency) and callable(getattr(data, "frequency_value", None)):
            return data.frequency_value(ctx, self.key)
        return 0


class FreqBuilder(Builder):
    """Builds ``freq.<key>`` variables."""

    name = FREQ_PREFIX

    def build(self, name: str) -> Optional[Freq]:
        key = name[len(FREQ_PREFIX):] if name.startswith(FREQ_PREFIX) else name
        if not key:
            return None
        return Freq(name, key)


register(DataBuilder())
register(FreqBuilder())
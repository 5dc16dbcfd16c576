"""Variable protocol, builders and the registry that resolves variable names."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any, MutableMapping, Optional, Protocol, runtime_checkable


class VariableError(Exception):
    """Raised when a variable cannot produce a value."""


class Variable(ABC):
    """A named value computed from a request context and data."""

    name: str = ""
    cacheable: bool = False

    @abstractmethod
    def value(self, ctx: Any, data: Any, cache: Optional[MutableMapping[str, Any]]) -> Any:
        """Compute the variable's value."""


class Builder(ABC):
    """Creates variables for a registered name or name prefix."""

    name: str = ""

    @abstractmethod
    def build(self, name: str) -> Optional[Variable]:
        """Return the variable for ``name``."""


@runtime_checkable
class Valuer(Protocol):
    """Data that resolves keys itself."""

    def value(self, ctx: Any, key: str) -> Any:
        ...


@runtime_checkable
class Frequency(Protocol):
    """Data that reports frequency counters."""

    def frequency_value(self, ctx: Any, key: str) -> Any:
        ...


class SimpleBuilder(Builder):
    """Builder that always returns the same variable."""

    def __init__(self, variable: Variable, name: Optional[str] = None) -> None:
        self.variable = variable
        self._name = name or ""

    @property
    def name(self) -> str:  # type: ignore[override]
        return self._name or self.variable.name

    def build(self, name: str) -> Variable:
        return self.variable


class Factory:
    """Registry of variable builders keyed by exact name or ``prefix.``."""

    def __init__(self) -> None:
        self._builders: dict[str, Builder] = {}
        self._lock = threading.Lock()

    def register(self, builder: Optional[Builder]) -> None:
        """Add a builder; names must be non-empty and unique."""
        if builder is None:
            raise ValueError("cannot register a nil variable builder")
        name = builder.name
        if not name:
            raise ValueError("cannot register variable builder with empty name")
        with self._lock:
            if name in self._builders:
                raise ValueError(f"{name} variable builder already exists")
            self._builders[name] = builder

    def get(self, name: str) -> Optional[Variable]:
        """Resolve ``name`` by exact match, then by its first segment as a prefix."""
        builder = self._builders.get(name)
        if builder is None:
            builder = self._builders.get(name.split(".", 1)[0] + ".")
        if builder is None:
            return None
        return builder.build(name)

    def describe(self) -> str:
        """Return a listing of registered builder names and their types."""
        lines = ["Variables: "]
        lines.extend(
            f"{name} {type(builder).__name__}" for name, builder in self._builders.items()
        )
        return "\n".join(lines) + "\n\n"

    def __contains__(self, name: object) -> bool:
        return name in self._builders


_default_factory = Factory()


def register(builder: Optional[Builder]) -> None:
    """Register a builder in the default registry."""
    _default_factory.register(builder)


def get(name: str) -> Optional[Variable]:
    """Resolve a variable from the default registry."""
    return _default_factory.get(name)


def get_value(
    ctx: Any,
    variable: Optional[Variable],
    data: Any,
    cache: Optional[MutableMapping[str, Any]],
) -> Any:
    """Evaluate ``variable``, using ``cache`` for cacheable variables."""
    if variable is None:
        raise VariableError("empty variable")
    use_cache = variable.cacheable and cache is not None
    if use_cache and variable.name in cache:
        return cache[variable.name]
    result = variable.value(ctx, data, cache)
    if use_cache:
        cache[variable.name] = result
    return result


def print_registry() -> None:
    """Print the default registry's contents."""
    print(_default_factory.describe(), end="")
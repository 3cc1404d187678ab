"""Converter registry — one canonicalizing function per drawing-command kind.

Usage:
    @converter(LineTo, RelativeLineTo, description="Degree-elevate a line")
    def line_to_cubic(command, cursor, previous) -> list[PathSegment]:
        ...

A converter receives the command, the current point, and the last canonical
segment emitted so far (None at the start of a subpath), and returns the
segments the command expands into. Registering a kind twice is an error, and
``ensure_complete`` rejects a registry that leaves any kind unhandled.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from vectormorph.engine.commands import PathCommand, PathSegment, Point

logger = logging.getLogger(__name__)

ConverterFn = Callable[["PathCommand", "Point", "PathSegment | None"], "list[PathSegment]"]


@dataclass
class ConverterSpec:
    kind: type
    fn: ConverterFn
    description: str = ""


class ConverterRegistry:
    """Maps each command class to the function that canonicalizes it."""

    def __init__(self) -> None:
        self._converters: dict[type, ConverterSpec] = {}

    def register(self, spec: ConverterSpec) -> None:
        if spec.kind in self._converters:
            raise ValueError(f"Duplicate converter for command kind: {spec.kind.__name__}")
        self._converters[spec.kind] = spec
        logger.debug("Registered converter %s for %s", spec.fn.__name__, spec.kind.__name__)

    def get(self, kind: type) -> ConverterSpec:
        return self._converters[kind]

    def missing(self, kinds: Iterable[type]) -> list[type]:
        return [k for k in kinds if k not in self._converters]

    def ensure_complete(self, kinds: Iterable[type]) -> None:
        missing = self.missing(kinds)
        if missing:
            names = ", ".join(k.__name__ for k in missing)
            raise ValueError(f"No converter registered for: {names}")

    def all(self) -> list[ConverterSpec]:
        return sorted(self._converters.values(), key=lambda s: s.kind.__name__)

    @property
    def count(self) -> int:
        return len(self._converters)


# Module-level singleton
_registry = ConverterRegistry()


def get_registry() -> ConverterRegistry:
    return _registry


def converter(*kinds: type, description: str = ""):
    """Decorator to register a converter for one or more command kinds."""

    def decorator(fn: ConverterFn) -> ConverterFn:
        for kind in kinds:
            _registry.register(ConverterSpec(kind=kind, fn=fn, description=description))
        return fn

    return decorator

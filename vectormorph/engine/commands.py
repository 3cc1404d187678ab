"""Drawing-command model — one frozen dataclass per path command kind.

Absolute and relative forms are distinct classes. Field names follow the SVG
path grammar so that every command serializes back to its path letter:

    x, y, x1..x3, y1..y3   absolute coordinates
    dx, dy, dx1..dy3       deltas from the current point
    rx, ry                 arc radii
"""

from __future__ import annotations

from dataclasses import astuple, dataclass, field, fields
from typing import ClassVar, NamedTuple


class Point(NamedTuple):
    x: float
    y: float

    def translated(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)

    def to_complex(self) -> complex:
        return complex(self.x, self.y)

    @classmethod
    def from_complex(cls, value: complex) -> Point:
        return cls(value.real, value.imag)


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class PathCommand:
    letter: ClassVar[str] = ""

    @property
    def is_relative(self) -> bool:
        return self.letter.islower()

    def args(self) -> tuple[float, ...]:
        return tuple(float(v) for v in astuple(self))


# --- Moves ---


@dataclass(frozen=True)
class MoveTo(PathCommand):
    letter: ClassVar[str] = "M"
    x: float
    y: float


@dataclass(frozen=True)
class RelativeMoveTo(PathCommand):
    letter: ClassVar[str] = "m"
    dx: float
    dy: float


# --- Lines ---


@dataclass(frozen=True)
class LineTo(PathCommand):
    letter: ClassVar[str] = "L"
    x: float
    y: float


@dataclass(frozen=True)
class RelativeLineTo(PathCommand):
    letter: ClassVar[str] = "l"
    dx: float
    dy: float


@dataclass(frozen=True)
class HorizontalTo(PathCommand):
    letter: ClassVar[str] = "H"
    x: float


@dataclass(frozen=True)
class RelativeHorizontalTo(PathCommand):
    letter: ClassVar[str] = "h"
    dx: float


@dataclass(frozen=True)
class VerticalTo(PathCommand):
    letter: ClassVar[str] = "V"
    y: float


@dataclass(frozen=True)
class RelativeVerticalTo(PathCommand):
    letter: ClassVar[str] = "v"
    dy: float


# --- Curves ---


@dataclass(frozen=True)
class CurveTo(PathCommand):
    letter: ClassVar[str] = "C"
    x1: float
    y1: float
    x2: float
    y2: float
    x3: float
    y3: float


@dataclass(frozen=True)
class RelativeCurveTo(PathCommand):
    letter: ClassVar[str] = "c"
    dx1: float
    dy1: float
    dx2: float
    dy2: float
    dx3: float
    dy3: float


@dataclass(frozen=True)
class QuadTo(PathCommand):
    letter: ClassVar[str] = "Q"
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class RelativeQuadTo(PathCommand):
    letter: ClassVar[str] = "q"
    dx1: float
    dy1: float
    dx2: float
    dy2: float


@dataclass(frozen=True)
class ReflectiveCurveTo(PathCommand):
    """Smooth cubic (S): first control point is implied by the previous curve."""

    letter: ClassVar[str] = "S"
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class RelativeReflectiveCurveTo(PathCommand):
    letter: ClassVar[str] = "s"
    dx1: float
    dy1: float
    dx2: float
    dy2: float


@dataclass(frozen=True)
class ReflectiveQuadTo(PathCommand):
    """Smooth quadratic (T): control point is implied by the previous curve."""

    letter: ClassVar[str] = "T"
    x: float
    y: float


@dataclass(frozen=True)
class RelativeReflectiveQuadTo(PathCommand):
    letter: ClassVar[str] = "t"
    dx: float
    dy: float


# --- Arcs ---


@dataclass(frozen=True)
class ArcTo(PathCommand):
    letter: ClassVar[str] = "A"
    rx: float
    ry: float
    rotation: float
    large_arc: bool
    sweep: bool
    x: float
    y: float


@dataclass(frozen=True)
class RelativeArcTo(PathCommand):
    letter: ClassVar[str] = "a"
    rx: float
    ry: float
    rotation: float
    large_arc: bool
    sweep: bool
    dx: float
    dy: float


@dataclass(frozen=True)
class Close(PathCommand):
    letter: ClassVar[str] = "Z"


ALL_COMMAND_TYPES: tuple[type[PathCommand], ...] = (
    MoveTo,
    RelativeMoveTo,
    LineTo,
    RelativeLineTo,
    HorizontalTo,
    RelativeHorizontalTo,
    VerticalTo,
    RelativeVerticalTo,
    CurveTo,
    RelativeCurveTo,
    QuadTo,
    RelativeQuadTo,
    ReflectiveCurveTo,
    RelativeReflectiveCurveTo,
    ReflectiveQuadTo,
    RelativeReflectiveQuadTo,
    ArcTo,
    RelativeArcTo,
    Close,
)

COMMANDS_BY_LETTER: dict[str, type[PathCommand]] = {cls.letter: cls for cls in ALL_COMMAND_TYPES}

MOVE_TYPES = (MoveTo, RelativeMoveTo)


def command_from_letter(letter: str, args: list[float] | tuple[float, ...]) -> PathCommand:
    """Build a command from its SVG path letter and numeric arguments.

    Raises KeyError for an unknown letter and TypeError for a wrong arity.
    """
    cls = COMMANDS_BY_LETTER[letter]
    values: list[float | bool] = list(args)
    if cls in (ArcTo, RelativeArcTo) and len(values) == 7:
        values[3] = bool(values[3])
        values[4] = bool(values[4])
    return cls(*values)


def arity(letter: str) -> int:
    return len(fields(COMMANDS_BY_LETTER[letter]))


def advance(command: PathCommand, cursor: Point) -> Point:
    """Return the current point after drawing ``command`` from ``cursor``.

    Close leaves the cursor where it is; callers that track the subpath start
    handle the jump back themselves.
    """
    if isinstance(command, (MoveTo, LineTo, ReflectiveQuadTo, ArcTo)):
        return Point(command.x, command.y)
    if isinstance(command, (RelativeMoveTo, RelativeLineTo, RelativeReflectiveQuadTo, RelativeArcTo)):
        return cursor.translated(command.dx, command.dy)
    if isinstance(command, HorizontalTo):
        return Point(command.x, cursor.y)
    if isinstance(command, RelativeHorizontalTo):
        return Point(cursor.x + command.dx, cursor.y)
    if isinstance(command, VerticalTo):
        return Point(cursor.x, command.y)
    if isinstance(command, RelativeVerticalTo):
        return Point(cursor.x, cursor.y + command.dy)
    if isinstance(command, CurveTo):
        return Point(command.x3, command.y3)
    if isinstance(command, RelativeCurveTo):
        return cursor.translated(command.dx3, command.dy3)
    if isinstance(command, (QuadTo, ReflectiveCurveTo)):
        return Point(command.x2, command.y2)
    if isinstance(command, (RelativeQuadTo, RelativeReflectiveCurveTo)):
        return cursor.translated(command.dx2, command.dy2)
    return cursor


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box of a shape: top-left corner plus size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def offset(self) -> Point:
        return Point(self.left, self.top)


@dataclass(frozen=True)
class VectorSource:
    """A shape to morph: its bounding box plus ordered drawing commands."""

    bounds: Bounds
    commands: tuple[PathCommand, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "commands", tuple(self.commands))


@dataclass(frozen=True)
class PathSegment:
    """Canonical segment: a leading MoveTo or a cubic CurveTo with its endpoints."""

    start: Point
    end: Point
    command: MoveTo | CurveTo

    @property
    def is_move(self) -> bool:
        return isinstance(self.command, MoveTo)

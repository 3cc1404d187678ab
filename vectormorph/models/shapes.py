"""Wire models for drawing commands and shape sources."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from vectormorph.engine.commands import (
    COMMANDS_BY_LETTER,
    Bounds,
    PathCommand,
    VectorSource,
    arity,
    command_from_letter,
)
from vectormorph.engine.measure import measure_bounds


class CommandModel(BaseModel):
    type: str = Field(..., description="SVG path letter (upper-case absolute, lower-case relative)")
    args: list[float] = Field(default_factory=list, description="Numeric arguments in SVG order")

    @model_validator(mode="after")
    def _check_arity(self) -> CommandModel:
        if self.type not in COMMANDS_BY_LETTER:
            raise ValueError(f"Unknown path command: {self.type!r}")
        expected = arity(self.type)
        if len(self.args) != expected:
            raise ValueError(f"Command {self.type!r} takes {expected} arguments, got {len(self.args)}")
        return self

    def to_command(self) -> PathCommand:
        return command_from_letter(self.type, self.args)

    @classmethod
    def from_command(cls, command: PathCommand) -> CommandModel:
        return cls(type=command.letter, args=list(command.args()))


class BoundsModel(BaseModel):
    left: float = 0.0
    top: float = 0.0
    width: float
    height: float

    def to_bounds(self) -> Bounds:
        return Bounds(left=self.left, top=self.top, width=self.width, height=self.height)


class VectorSourceModel(BaseModel):
    commands: list[CommandModel] = Field(default_factory=list)
    bounds: BoundsModel | None = Field(
        default=None,
        description="Shape bounding box; measured from the commands when omitted",
    )

    def to_source(self) -> VectorSource:
        commands = tuple(c.to_command() for c in self.commands)
        bounds = self.bounds.to_bounds() if self.bounds is not None else measure_bounds(commands)
        return VectorSource(bounds=bounds, commands=commands)

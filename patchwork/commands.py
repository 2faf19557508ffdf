"""Named transform commands.

A command is one line of text naming a transform and its numbers:

    rotate <angle> [<ox> <oy>]
    homothety <ratio> [<ox> <oy>]
    translate <dx> <dy>
    central_sym <cx> <cy>
    axial_sym <px> <py> <dx> <dy>

Commands apply to any shape, images included.
"""

import logging

from pydantic import BaseModel, ConfigDict, model_validator

from patchwork.codec import parse_float
from patchwork.shapes import Shape
from patchwork.types import TransformKind, Vec2, transform_kind_from_name

logger = logging.getLogger(__name__)


class CommandError(ValueError):
    """A transform command could not be parsed."""


# Accepted argument counts per transform
_ARITY: dict[TransformKind, tuple[int, ...]] = {
    TransformKind.ROTATE: (1, 3),
    TransformKind.HOMOTHETY: (1, 3),
    TransformKind.TRANSLATE: (2,),
    TransformKind.CENTRAL_SYM: (2,),
    TransformKind.AXIAL_SYM: (4,),
}

_NEEDS_POINT = (TransformKind.TRANSLATE, TransformKind.CENTRAL_SYM, TransformKind.AXIAL_SYM)


class TransformCommand(BaseModel):
    """A parsed transform.

    Attributes:
        kind: Which transform to run
        amount: Angle in radians (rotate) or ratio (homothety)
        point: Pivot, offset, centre or axis point depending on kind
        direction: Axis direction (axial_sym only)
    """

    model_config = ConfigDict(frozen=True)

    kind: TransformKind
    amount: float | None = None
    point: Vec2 | None = None
    direction: Vec2 | None = None

    @model_validator(mode="after")
    def _check_fields(self) -> "TransformCommand":
        if self.kind in (TransformKind.ROTATE, TransformKind.HOMOTHETY) and self.amount is None:
            raise ValueError(f"{self.kind.value} needs an amount")
        if self.kind in _NEEDS_POINT and self.point is None:
            raise ValueError(f"{self.kind.value} needs a point")
        if self.kind == TransformKind.AXIAL_SYM and self.direction is None:
            raise ValueError("axial_sym needs a direction")
        return self


def parse_command(text: str) -> TransformCommand:
    """Parse one command line.

    Raises:
        CommandError: Unknown transform, wrong argument count or bad number
    """
    tokens = text.split()
    if not tokens:
        raise CommandError("Empty command")

    name, raw_args = tokens[0], tokens[1:]
    kind = transform_kind_from_name(name)
    if kind is None:
        known = ", ".join(k.value for k in TransformKind)
        raise CommandError(f"Unknown transform {name!r} (expected one of: {known})")

    if len(raw_args) not in _ARITY[kind]:
        counts = " or ".join(str(n) for n in _ARITY[kind])
        raise CommandError(f"{name} takes {counts} numbers, got {len(raw_args)}")

    args: list[float] = []
    for token in raw_args:
        value = parse_float(token)
        if value is None:
            raise CommandError(f"{name}: {token!r} is not a number")
        args.append(value)

    match kind:
        case TransformKind.ROTATE | TransformKind.HOMOTHETY:
            pivot = Vec2(x=args[1], y=args[2]) if len(args) == 3 else None
            return TransformCommand(kind=kind, amount=args[0], point=pivot)
        case TransformKind.TRANSLATE | TransformKind.CENTRAL_SYM:
            return TransformCommand(kind=kind, point=Vec2(x=args[0], y=args[1]))
        case TransformKind.AXIAL_SYM:
            return TransformCommand(
                kind=kind,
                point=Vec2(x=args[0], y=args[1]),
                direction=Vec2(x=args[2], y=args[3]),
            )


def apply_command(shape: Shape, command: TransformCommand) -> None:
    """Run a command on a shape in place."""
    logger.debug(f"Applying {command.kind.value} to {shape.kind.value}")
    match command.kind:
        case TransformKind.ROTATE:
            assert command.amount is not None
            shape.rotate(command.amount, command.point)
        case TransformKind.HOMOTHETY:
            assert command.amount is not None
            shape.homothety(command.amount, command.point)
        case TransformKind.TRANSLATE:
            assert command.point is not None
            shape.translate(command.point)
        case TransformKind.CENTRAL_SYM:
            assert command.point is not None
            shape.central_sym(command.point)
        case TransformKind.AXIAL_SYM:
            assert command.point is not None and command.direction is not None
            shape.axial_sym(command.point, command.direction)

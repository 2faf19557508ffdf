"""RGB color value type."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """An RGB color with 8-bit channels."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    def __str__(self) -> str:
        return f"({self.r}, {self.g}, {self.b})"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @classmethod
    def from_hex(cls, hex_color: str) -> Color:
        """Parse a #rrggbb string."""
        hex_color = hex_color.lstrip("#")
        if len(hex_color) != 6:
            raise ValueError(f"Expected #rrggbb color, got {hex_color!r}")
        return cls(
            r=int(hex_color[0:2], 16),
            g=int(hex_color[2:4], 16),
            b=int(hex_color[4:6], 16),
        )


BLACK = Color(r=0, g=0, b=0)
WHITE = Color(r=255, g=255, b=255)

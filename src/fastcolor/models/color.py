"""Component color models."""

from pydantic import BaseModel, ConfigDict, Field


class Rgb(BaseModel):
    """8-bit RGB color components.

    The model is frozen so instances are hashable values with no identity
    of their own: every conversion returns a fresh instance and nothing is
    shared between calls.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    def to_tuple(self) -> tuple[int, int, int]:
        """Convert to (r, g, b) tuple."""
        return (self.r, self.g, self.b)

    def to_number(self) -> int:
        """Pack into a 0xRRGGBB integer.

        Example:
            >>> Rgb(r=200, g=100, b=56).to_number()
            13132856
        """
        return (self.r << 16) | (self.g << 8) | self.b

    def to_hex(self) -> str:
        """Convert to a lowercase '#rrggbb' string.

        Example:
            >>> Rgb(r=255, g=0, b=0).to_hex()
            '#ff0000'
        """
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def with_alpha(self, a: int = 255) -> "Rgba":
        """Return the same color with an alpha channel."""
        return Rgba(r=self.r, g=self.g, b=self.b, a=a)


class Rgba(BaseModel):
    """8-bit RGBA color components."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")
    a: int = Field(ge=0, le=255, description="Alpha (0-255)")

    def to_tuple(self) -> tuple[int, int, int, int]:
        """Convert to (r, g, b, a) tuple."""
        return (self.r, self.g, self.b, self.a)

    def to_number(self) -> int:
        """Pack into a 0xRRGGBBAA integer.

        Example:
            >>> Rgba(r=200, g=100, b=56, a=180).to_number()
            3362011316
        """
        return self.r * 16777216 + self.g * 65536 + self.b * 256 + self.a

    def to_hex(self) -> str:
        """Convert to a lowercase '#rrggbbaa' string."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}{self.a:02x}"

    def to_rgb(self) -> Rgb:
        """Drop the alpha channel."""
        return Rgb(r=self.r, g=self.g, b=self.b)

"""Description of a single encoded rational."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..codec.format import WidthClass


class RationalInfo(BaseModel):
    """Field-by-field breakdown of one encoded rational.

    Produced by :func:`ratcodec.inspect_rational` and printed by the
    ``ratcodec inspect`` command.

    Example:
        >>> info = inspect_rational(bytes.fromhex("110304"))
        >>> info.numerator, info.denominator, info.size
        (3, 4, 3)
    """

    model_config = ConfigDict(frozen=True)

    discriminant: int = Field(ge=0, le=255, description="Leading discriminant byte")
    negative: bool = Field(description="Sign flag (applies to the numerator)")
    numerator_class: WidthClass = Field(description="Numerator width-class")
    denominator_class: WidthClass = Field(description="Denominator width-class")
    numerator: int = Field(description="Decoded signed numerator")
    denominator: int = Field(ge=0, description="Decoded denominator")
    size: int = Field(ge=2, description="Encoded size in bytes, discriminant included")
    hex: str = Field(description="Encoded bytes as lowercase hex")

    @property
    def implicit_denominator(self) -> bool:
        """True when the denominator bytes were omitted."""
        return self.denominator_class is WidthClass.ABSENT

    def as_fraction(self) -> str:
        """Render as ``n`` or ``n/d``."""
        if self.implicit_denominator:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

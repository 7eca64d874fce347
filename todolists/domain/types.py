"""Domain value objects for todolists.

Immutable value objects representing small domain concepts.
"""

import re
from dataclasses import dataclass

_HEX_COLOUR = re.compile(r"^#?([0-9a-fA-F]{6})$")


@dataclass(frozen=True)
class Colour:
    """RGB display colour of a task list.

    Example:
        colour = Colour.from_hex("#ffa500")
        str(colour)  # "#ffa500"
    """

    r: int = 128
    g: int = 128
    b: int = 128

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    @classmethod
    def from_hex(cls, value: str) -> "Colour":
        """Create a Colour from a ``#rrggbb`` (or ``rrggbb``) string.

        Args:
            value: Hex colour string

        Returns:
            New Colour with the parsed channels

        Raises:
            ValueError: If the string is not a six digit hex colour
        """
        match = _HEX_COLOUR.match(value.strip())
        if not match:
            raise ValueError(f"invalid hex colour: {value}")
        digits = match.group(1)
        return cls(r=int(digits[0:2], 16), g=int(digits[2:4], 16), b=int(digits[4:6], 16))

    def __str__(self) -> str:
        """Return the colour as a ``#rrggbb`` string."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

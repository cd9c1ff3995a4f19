from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from typing_extensions import Self


@dataclass(frozen=True, slots=True)
class Color:
    """24-bit RGB color."""

    r: int
    g: int
    b: int

    HEX_PATTERN = re.compile(r"#([0-9a-fA-F]{6})")

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel out of range: {channel}")

    @classmethod
    def of(cls, r: int, g: int, b: int) -> Self:
        return cls(r, g, b)

    @classmethod
    def from_int(cls, value: int) -> Self:
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_hex(cls, hex: str) -> Self:
        """Parse ``#rrggbb``.

        Raises:
            ValueError: if ``hex`` is not a 6-digit hex color.
        """
        match = cls.HEX_PATTERN.fullmatch(hex)
        if match is None:
            raise ValueError(f"Invalid hex color: {hex!r}")
        return cls.from_int(int(match.group(1), 16))

    @classmethod
    def parse(cls, value: str) -> Color:
        """Parse a named color (case-insensitive) or ``#rrggbb``."""
        if value.startswith("#"):
            return cls.from_hex(value)
        named = Palette.lookup(value)
        if named is None:
            raise ValueError(f"Unknown color: {value!r}")
        return named

    def to_int(self) -> int:
        return (self.r << 16) | (self.g << 8) | self.b

    def to_hex(self) -> str:
        return f"#{self.to_int():06x}"

    @property
    def name(self) -> str | None:
        """Name of the palette entry with exactly this value, if any."""
        return Palette.name_of(self)

    def __str__(self) -> str:
        return self.name or self.to_hex()


class Palette(Enum):
    BLACK = Color(0x00, 0x00, 0x00)
    DARK_BLUE = Color(0x00, 0x00, 0xAA)
    DARK_GREEN = Color(0x00, 0xAA, 0x00)
    DARK_AQUA = Color(0x00, 0xAA, 0xAA)
    DARK_RED = Color(0xAA, 0x00, 0x00)
    DARK_PURPLE = Color(0xAA, 0x00, 0xAA)
    GOLD = Color(0xFF, 0xAA, 0x00)
    GRAY = Color(0xAA, 0xAA, 0xAA)
    DARK_GRAY = Color(0x55, 0x55, 0x55)
    BLUE = Color(0x55, 0x55, 0xFF)
    GREEN = Color(0x55, 0xFF, 0x55)
    AQUA = Color(0x55, 0xFF, 0xFF)
    RED = Color(0xFF, 0x55, 0x55)
    LIGHT_PURPLE = Color(0xFF, 0x55, 0xFF)
    YELLOW = Color(0xFF, 0xFF, 0x55)
    WHITE = Color(0xFF, 0xFF, 0xFF)

    @classmethod
    def lookup(cls, name: str) -> Color | None:
        member = cls.__members__.get(name.upper())
        return member.value if member is not None else None

    @classmethod
    def name_of(cls, color: Color) -> str | None:
        try:
            return cls(color).name.lower()
        except ValueError:
            return None

    @classmethod
    def names(cls) -> list[str]:
        return [name.lower() for name in cls.__members__]

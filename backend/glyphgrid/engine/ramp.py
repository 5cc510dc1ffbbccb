"""Character ramps — ordered glyph sequences, densest first.

Usage:
    ramp = get_registry().get("standard")
    ramp.glyphs[0]   # '@' for the darkest samples
    ramp.glyphs[-1]  # ' ' for the brightest samples

Presets are registered once at import. Custom ramps are plain
``CharacterRamp`` values and never need registering.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from glyphgrid.engine.errors import InvalidArgument

logger = logging.getLogger(__name__)

MIN_RAMP_LENGTH = 2

STANDARD_GLYPHS = "@%#*+=-:. "

# Paul Bourke's 70-level grayscale ramp
DETAILED_GLYPHS = (
    "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~<>i!lI;:,\"^`'. "
)

BLOCK_GLYPHS = "█▓▒░ "

DEFAULT_RAMP_NAME = "standard"


@dataclass(frozen=True)
class CharacterRamp:
    """Glyphs ordered from most to least visually dense."""

    glyphs: str
    name: str = "custom"

    def __post_init__(self) -> None:
        if not isinstance(self.glyphs, str):
            raise InvalidArgument("ramp glyphs must be a string")
        if len(self.glyphs) < MIN_RAMP_LENGTH:
            raise InvalidArgument(
                f"ramp needs at least {MIN_RAMP_LENGTH} glyphs, got {len(self.glyphs)}"
            )
        if "\n" in self.glyphs or "\r" in self.glyphs:
            raise InvalidArgument("ramp glyphs must not contain line breaks")

    @classmethod
    def from_sequence(cls, glyphs: Sequence[str], name: str = "custom") -> CharacterRamp:
        if any(len(g) != 1 for g in glyphs):
            raise InvalidArgument("every ramp entry must be a single character")
        return cls(glyphs="".join(glyphs), name=name)

    def __len__(self) -> int:
        return len(self.glyphs)

    def __getitem__(self, index: int) -> str:
        return self.glyphs[index]

    def __contains__(self, glyph: object) -> bool:
        return isinstance(glyph, str) and len(glyph) == 1 and glyph in self.glyphs

    @property
    def densest(self) -> str:
        return self.glyphs[0]

    @property
    def sparsest(self) -> str:
        return self.glyphs[-1]

    def reversed(self, name: str | None = None) -> CharacterRamp:
        """Same glyphs, sparse first. For light-on-dark displays."""
        return CharacterRamp(glyphs=self.glyphs[::-1], name=name or f"{self.name}-reversed")


DEFAULT_RAMP = CharacterRamp(STANDARD_GLYPHS, name=DEFAULT_RAMP_NAME)


class RampRegistry:
    """Named ramp presets."""

    def __init__(self) -> None:
        self._ramps: dict[str, CharacterRamp] = {}

    def register(self, ramp: CharacterRamp) -> None:
        if ramp.name in self._ramps:
            raise ValueError(f"Duplicate ramp name: {ramp.name}")
        self._ramps[ramp.name] = ramp
        logger.debug("Registered ramp %s (%d glyphs)", ramp.name, len(ramp))

    def get(self, name: str) -> CharacterRamp:
        try:
            return self._ramps[name]
        except KeyError:
            known = ", ".join(sorted(self._ramps))
            raise InvalidArgument(f"unknown ramp {name!r} (known: {known})") from None

    def all(self) -> list[CharacterRamp]:
        return sorted(self._ramps.values(), key=lambda r: r.name)

    @property
    def count(self) -> int:
        return len(self._ramps)


# Module-level singleton
_registry = RampRegistry()
_registry.register(DEFAULT_RAMP)
_registry.register(CharacterRamp(DETAILED_GLYPHS, name="detailed"))
_registry.register(CharacterRamp(BLOCK_GLYPHS, name="blocks"))
_registry.register(DEFAULT_RAMP.reversed(name="inverted"))


def get_registry() -> RampRegistry:
    return _registry


def resolve_ramp(name: str | None = None, glyphs: str | None = None) -> CharacterRamp:
    """Pick a ramp: explicit glyphs win over a preset name, then the default."""
    if glyphs is not None:
        return CharacterRamp(glyphs)
    if name is not None:
        return _registry.get(name)
    return DEFAULT_RAMP

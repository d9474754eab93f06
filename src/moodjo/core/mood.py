"""Mood codec - stored mood strings to and from emotion grid points.

Two formats are readable:

- canonical: ``Hue|energy|valence`` (e.g. ``Yellow|2|2``), written by
  current versions;
- legacy: a ``#rrggbb`` color written by older versions, mapped to the
  nearest grid point. This path is lossy.
"""

import colorsys
import re
from dataclasses import dataclass
from enum import Enum

from .emotions import EmotionPoint, Energy, Hue, Valence

SEPARATOR = "|"

# Legacy thresholds. Kept as-is so old entries keep decoding to the same mood.
LOW_SATURATION_MAX = 0.6
MEDIUM_SATURATION_MAX = 0.75
NEGATIVE_BRIGHTNESS_MAX = 0.65
NEUTRAL_BRIGHTNESS_MAX = 0.85

_HEX_RE = re.compile(r"[0-9a-fA-F]{6}")
_DIGITS_RE = re.compile(r"[0-9]+")


class MoodSource(Enum):
    """Which stored format a mood was decoded from."""

    CANONICAL = "canonical"
    LEGACY = "legacy"


@dataclass(frozen=True)
class DecodedMood:
    """A decoded mood plus the format it came from."""

    point: EmotionPoint
    source: MoodSource

    @property
    def is_legacy(self) -> bool:
        return self.source is MoodSource.LEGACY


def encode(point: EmotionPoint) -> str:
    """Serialize a grid point to its canonical string."""
    return SEPARATOR.join([point.hue.value, str(int(point.energy)), str(int(point.valence))])


def parse_canonical(value: str) -> EmotionPoint | None:
    """Parse ``Hue|energy|valence``. Returns None unless all three fields are valid."""
    parts = value.split(SEPARATOR)
    if len(parts) != 3:
        return None

    hue_raw, energy_raw, valence_raw = parts
    if not (_DIGITS_RE.fullmatch(energy_raw) and _DIGITS_RE.fullmatch(valence_raw)):
        return None

    try:
        return EmotionPoint(
            hue=Hue(hue_raw),
            energy=Energy(int(energy_raw)),
            valence=Valence(int(valence_raw)),
        )
    except ValueError:
        return None


def _nearest_hue(angle: float) -> Hue:
    """Grid hue closest to an angle on the circular [0, 1) scale."""
    closest = Hue.RED
    min_distance = float("inf")
    for hue in Hue:
        diff = abs(hue.angle - angle)
        distance = min(diff, 1 - diff)
        if distance < min_distance:
            min_distance = distance
            closest = hue
    return closest


def parse_legacy_hex(value: str) -> EmotionPoint | None:
    """
    Approximate a grid point from a legacy ``#rrggbb`` color.

    Hue is the nearest grid hue by circular distance; energy comes from
    saturation and valence from brightness, using fixed thresholds.
    """
    cleaned = value.strip()
    if cleaned.startswith("#"):
        cleaned = cleaned[1:]
    if not _HEX_RE.fullmatch(cleaned):
        return None

    rgb = int(cleaned, 16)
    red = ((rgb >> 16) & 0xFF) / 255.0
    green = ((rgb >> 8) & 0xFF) / 255.0
    blue = (rgb & 0xFF) / 255.0
    h, s, b = colorsys.rgb_to_hsv(red, green, blue)

    if s < LOW_SATURATION_MAX:
        energy = Energy.LOW
    elif s < MEDIUM_SATURATION_MAX:
        energy = Energy.MEDIUM
    else:
        energy = Energy.HIGH

    if b < NEGATIVE_BRIGHTNESS_MAX:
        valence = Valence.NEGATIVE
    elif b < NEUTRAL_BRIGHTNESS_MAX:
        valence = Valence.NEUTRAL
    else:
        valence = Valence.POSITIVE

    return EmotionPoint(hue=_nearest_hue(h), energy=energy, valence=valence)


def decode_mood(value: str | None) -> DecodedMood | None:
    """Decode a stored mood string, keeping track of which format matched.

    Returns None when the value is neither canonical nor legacy; callers
    treat that as "no mood recorded".
    """
    if not value:
        return None

    point = parse_canonical(value)
    if point is not None:
        return DecodedMood(point, MoodSource.CANONICAL)

    point = parse_legacy_hex(value)
    if point is not None:
        return DecodedMood(point, MoodSource.LEGACY)

    return None


def decode(value: str | None) -> EmotionPoint | None:
    """Decode a stored mood string to a grid point, or None."""
    decoded = decode_mood(value)
    return decoded.point if decoded else None


def to_legacy_hex(point: EmotionPoint) -> str:
    """The ``#rrggbb`` form older versions stored for this point."""
    return point.color.hex

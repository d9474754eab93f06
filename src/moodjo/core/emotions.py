"""Emotion taxonomy - pure mapping from (hue, energy, valence) to name and color."""

import colorsys
from dataclasses import dataclass
from enum import Enum, IntEnum


class Hue(Enum):
    """Color family, the first axis of the emotion grid."""

    RED = "Red"
    ORANGE = "Orange"
    YELLOW = "Yellow"
    GREEN = "Green"
    BLUE = "Blue"
    PURPLE = "Purple"

    @property
    def angle(self) -> float:
        """Base hue on a normalized [0, 1) color wheel."""
        return HUE_ANGLES[self]


class Energy(IntEnum):
    """Activation level. Drives saturation."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Valence(IntEnum):
    """Emotional polarity. Drives brightness."""

    NEGATIVE = 0
    NEUTRAL = 1
    POSITIVE = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


HUE_ANGLES = {
    Hue.RED: 0.0,
    Hue.ORANGE: 0.08,
    Hue.YELLOW: 0.15,
    Hue.GREEN: 0.35,
    Hue.BLUE: 0.58,
    Hue.PURPLE: 0.75,
}

BRIGHTNESS = {
    Valence.NEGATIVE: 0.55,
    Valence.NEUTRAL: 0.75,
    Valence.POSITIVE: 0.95,
}

SATURATION = {
    Energy.LOW: 0.55,
    Energy.MEDIUM: 0.70,
    Energy.HIGH: 0.85,
}

# Indexed [energy][valence]: rows low -> high energy, columns negative -> positive.
EMOTION_GRID: dict[Hue, list[list[str]]] = {
    Hue.RED: [
        ["Resentful", "Moody", "Warm"],
        ["Frustrated", "Intense", "Loving"],
        ["Enraged", "Passionate", "Excited"],
    ],
    Hue.ORANGE: [
        ["Drained", "Mellow", "Cozy"],
        ["Restless", "Eager", "Cheerful"],
        ["Overwhelmed", "Energetic", "Thrilled"],
    ],
    Hue.YELLOW: [
        ["Uneasy", "Pensive", "Content"],
        ["Nervous", "Curious", "Optimistic"],
        ["Anxious", "Alert", "Joyful"],
    ],
    Hue.GREEN: [
        ["Stagnant", "Resting", "Peaceful"],
        ["Envious", "Balanced", "Refreshed"],
        ["Jealous", "Determined", "Alive"],
    ],
    Hue.BLUE: [
        ["Depressed", "Calm", "Serene"],
        ["Melancholy", "Thoughtful", "Hopeful"],
        ["Distressed", "Focused", "Inspired"],
    ],
    Hue.PURPLE: [
        ["Lonely", "Dreamy", "Mystical"],
        ["Conflicted", "Reflective", "Creative"],
        ["Grieving", "Intense", "Empowered"],
    ],
}


@dataclass(frozen=True)
class Color:
    """An HSB color. All components are in [0, 1]."""

    hue: float
    saturation: float
    brightness: float

    @property
    def rgb(self) -> tuple[int, int, int]:
        """RGB components scaled to 0-255, truncated."""
        r, g, b = colorsys.hsv_to_rgb(self.hue, self.saturation, self.brightness)
        return int(r * 255), int(g * 255), int(b * 255)

    @property
    def hex(self) -> str:
        r, g, b = self.rgb
        return f"#{r:02x}{g:02x}{b:02x}"


@dataclass(frozen=True)
class EmotionPoint:
    """One cell of the emotion grid."""

    hue: Hue
    energy: Energy
    valence: Valence

    @property
    def name(self) -> str:
        return emotion_name(self.hue, self.energy, self.valence)

    @property
    def color(self) -> Color:
        return emotion_color(self.hue, self.energy, self.valence)

    def __str__(self) -> str:
        return f"{self.name} ({self.hue.value}, {self.energy.label} energy, {self.valence.label})"


def emotion_name(hue: Hue, energy: Energy, valence: Valence) -> str:
    """Name of the emotion at a grid position."""
    return EMOTION_GRID[hue][energy][valence]


def emotion_color(hue: Hue, energy: Energy, valence: Valence) -> Color:
    """
    Color at a grid position.

    Brightness follows valence (positive = brightest), saturation
    follows energy (high = most saturated).
    """
    return Color(hue=hue.angle, saturation=SATURATION[energy], brightness=BRIGHTNESS[valence])


def emotion(hue: Hue, energy: Energy, valence: Valence) -> tuple[str, Color]:
    """Name and color for a grid position. Defined for every combination."""
    return emotion_name(hue, energy, valence), emotion_color(hue, energy, valence)


def all_points() -> list[EmotionPoint]:
    """Every grid cell, hue-major, then energy, then valence."""
    return [
        EmotionPoint(hue, energy, valence)
        for hue in Hue
        for energy in Energy
        for valence in Valence
    ]


def find_by_name(name: str) -> list[EmotionPoint]:
    """All grid cells carrying this emotion name (case-insensitive)."""
    wanted = name.strip().lower()
    return [p for p in all_points() if p.name.lower() == wanted]


# Quick-pick moods from the original single-row picker
PRESETS: list[EmotionPoint] = [
    EmotionPoint(Hue.YELLOW, Energy.HIGH, Valence.POSITIVE),
    EmotionPoint(Hue.BLUE, Energy.LOW, Valence.POSITIVE),
    EmotionPoint(Hue.RED, Energy.HIGH, Valence.NEGATIVE),
    EmotionPoint(Hue.YELLOW, Energy.HIGH, Valence.NEGATIVE),
    EmotionPoint(Hue.GREEN, Energy.LOW, Valence.POSITIVE),
    EmotionPoint(Hue.ORANGE, Energy.HIGH, Valence.POSITIVE),
    EmotionPoint(Hue.RED, Energy.MEDIUM, Valence.POSITIVE),
    EmotionPoint(Hue.GREEN, Energy.MEDIUM, Valence.NEUTRAL),
    EmotionPoint(Hue.BLUE, Energy.LOW, Valence.NEGATIVE),
]

"""Tests for the emotion taxonomy."""

import pytest

from moodjo.core.emotions import (
    PRESETS,
    Color,
    EmotionPoint,
    Energy,
    Hue,
    Valence,
    all_points,
    emotion,
    emotion_color,
    emotion_name,
    find_by_name,
)


class TestEmotionName:
    def test_grid_corners(self):
        assert emotion_name(Hue.RED, Energy.LOW, Valence.NEGATIVE) == "Resentful"
        assert emotion_name(Hue.RED, Energy.HIGH, Valence.POSITIVE) == "Excited"
        assert emotion_name(Hue.PURPLE, Energy.LOW, Valence.POSITIVE) == "Mystical"
        assert emotion_name(Hue.PURPLE, Energy.HIGH, Valence.NEGATIVE) == "Grieving"

    def test_grid_is_energy_then_valence(self):
        # Rows are energy, columns are valence
        assert emotion_name(Hue.YELLOW, Energy.HIGH, Valence.POSITIVE) == "Joyful"
        assert emotion_name(Hue.YELLOW, Energy.HIGH, Valence.NEGATIVE) == "Anxious"
        assert emotion_name(Hue.YELLOW, Energy.LOW, Valence.POSITIVE) == "Content"
        assert emotion_name(Hue.BLUE, Energy.MEDIUM, Valence.NEUTRAL) == "Thoughtful"

    def test_point_name_matches_lookup(self):
        point = EmotionPoint(Hue.GREEN, Energy.MEDIUM, Valence.NEUTRAL)
        assert point.name == "Balanced"


class TestExhaustiveness:
    def test_all_points_covers_grid(self):
        points = all_points()
        assert len(points) == 54
        assert len(set(points)) == 54

    @pytest.mark.parametrize("point", all_points(), ids=str)
    def test_every_cell_has_name_and_color(self, point):
        name, color = emotion(point.hue, point.energy, point.valence)
        assert name
        assert isinstance(color, Color)
        assert 0.0 <= color.hue < 1.0
        assert 0.0 < color.saturation <= 1.0
        assert 0.0 < color.brightness <= 1.0

    def test_each_hue_has_distinct_colors(self):
        for hue in Hue:
            colors = {emotion_color(hue, e, v) for e in Energy for v in Valence}
            assert len(colors) == 9


class TestColorMonotonicity:
    @pytest.mark.parametrize("hue", list(Hue))
    @pytest.mark.parametrize("energy", list(Energy))
    def test_brightness_increases_with_valence(self, hue, energy):
        neg = emotion_color(hue, energy, Valence.NEGATIVE).brightness
        neu = emotion_color(hue, energy, Valence.NEUTRAL).brightness
        pos = emotion_color(hue, energy, Valence.POSITIVE).brightness
        assert pos > neu > neg

    @pytest.mark.parametrize("hue", list(Hue))
    @pytest.mark.parametrize("valence", list(Valence))
    def test_saturation_increases_with_energy(self, hue, valence):
        low = emotion_color(hue, Energy.LOW, valence).saturation
        medium = emotion_color(hue, Energy.MEDIUM, valence).saturation
        high = emotion_color(hue, Energy.HIGH, valence).saturation
        assert high > medium > low

    def test_hue_comes_from_hue_axis_only(self):
        for energy in Energy:
            for valence in Valence:
                assert emotion_color(Hue.BLUE, energy, valence).hue == 0.58


class TestColor:
    def test_hex_of_pure_red(self):
        assert Color(hue=0.0, saturation=1.0, brightness=1.0).hex == "#ff0000"

    def test_rgb_truncates(self):
        # 0.55 * 255 = 140.25
        assert Color(hue=0.0, saturation=0.0, brightness=0.55).rgb == (140, 140, 140)

    def test_joyful_hex(self):
        point = EmotionPoint(Hue.YELLOW, Energy.HIGH, Valence.POSITIVE)
        assert point.color.hex == "#f2dd24"


class TestFindByName:
    def test_unique_name(self):
        assert find_by_name("joyful") == [EmotionPoint(Hue.YELLOW, Energy.HIGH, Valence.POSITIVE)]

    def test_name_used_twice(self):
        matches = find_by_name("Intense")
        assert EmotionPoint(Hue.RED, Energy.MEDIUM, Valence.NEUTRAL) in matches
        assert EmotionPoint(Hue.PURPLE, Energy.HIGH, Valence.NEUTRAL) in matches
        assert len(matches) == 2

    def test_unknown_name(self):
        assert find_by_name("Bored") == []


class TestPoint:
    def test_points_are_immutable(self):
        point = EmotionPoint(Hue.RED, Energy.LOW, Valence.NEUTRAL)
        with pytest.raises(AttributeError):
            point.hue = Hue.BLUE

    def test_str(self):
        point = EmotionPoint(Hue.BLUE, Energy.LOW, Valence.POSITIVE)
        assert str(point) == "Serene (Blue, Low energy, Positive)"

    def test_presets(self):
        assert len(PRESETS) == 9
        assert PRESETS[0].name == "Joyful"
        assert PRESETS[-1].name == "Depressed"

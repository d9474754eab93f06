"""Tests for the mood codec."""

import pytest

from moodjo.core.emotions import EmotionPoint, Energy, Hue, Valence, all_points
from moodjo.core.mood import (
    DecodedMood,
    MoodSource,
    decode,
    decode_mood,
    encode,
    parse_canonical,
    parse_legacy_hex,
    to_legacy_hex,
)


@pytest.fixture
def joyful():
    return EmotionPoint(Hue.YELLOW, Energy.HIGH, Valence.POSITIVE)


class TestEncode:
    def test_canonical_form(self, joyful):
        assert encode(joyful) == "Yellow|2|2"

    def test_low_negative(self):
        assert encode(EmotionPoint(Hue.PURPLE, Energy.LOW, Valence.NEGATIVE)) == "Purple|0|0"

    def test_round_trip_every_point(self):
        for point in all_points():
            assert decode(encode(point)) == point


class TestParseCanonical:
    def test_valid(self, joyful):
        assert parse_canonical("Yellow|2|2") == joyful

    @pytest.mark.parametrize(
        "value",
        [
            "yellow|2|2",  # hue is case-sensitive
            "Pink|1|1",
            "Red|3|0",
            "Red|0|3",
            "Red|1",
            "Red|1|1|1",
            "Red||1|1",
            "Red| 1|1",
            "Red|-1|1",
            "Red|a|b",
            "Red|１|２",  # fullwidth digits
            "Red|1|٢",
            "",
        ],
    )
    def test_invalid(self, value):
        assert parse_canonical(value) is None


class TestParseLegacyHex:
    def test_gold_is_joyful(self, joyful):
        # #FFD700: hue ~0.14 (nearest Yellow 0.15), saturation 1.0, brightness 1.0
        assert parse_legacy_hex("#FFD700") == joyful

    def test_without_hash(self, joyful):
        assert parse_legacy_hex("ffd700") == joyful

    def test_surrounding_whitespace(self, joyful):
        assert parse_legacy_hex("  #ffd700\n") == joyful

    def test_black(self):
        # Achromatic: hue 0 -> Red, saturation 0 -> Low, brightness 0 -> Negative
        assert parse_legacy_hex("#000000") == EmotionPoint(Hue.RED, Energy.LOW, Valence.NEGATIVE)

    def test_white(self):
        assert parse_legacy_hex("#ffffff") == EmotionPoint(Hue.RED, Energy.LOW, Valence.POSITIVE)

    def test_hue_wraps_around(self):
        # #ff0080 has hue ~0.916: 0.084 from Red across the wrap, 0.166 from Purple
        assert parse_legacy_hex("#ff0080").hue == Hue.RED

    def test_nearest_hue_blue(self):
        # #0080ff is hue ~0.583, right on Blue (0.58)
        assert parse_legacy_hex("#0080ff").hue == Hue.BLUE

    def test_pure_blue_is_nearer_purple(self):
        # Pure blue is hue 0.667: 0.083 from Purple (0.75), 0.087 from Blue (0.58)
        assert parse_legacy_hex("#0000ff").hue == Hue.PURPLE

    def test_saturation_thresholds(self):
        # Grey-ish red: max 200, min 100 -> saturation 0.5
        assert parse_legacy_hex("#c86464").energy == Energy.LOW
        # max 200, min 70 -> saturation 0.65
        assert parse_legacy_hex("#c84646").energy == Energy.MEDIUM
        # max 200, min 40 -> saturation 0.8
        assert parse_legacy_hex("#c82828").energy == Energy.HIGH

    def test_brightness_thresholds(self):
        # 140/255 = 0.549
        assert parse_legacy_hex("#8c0000").valence == Valence.NEGATIVE
        # 191/255 = 0.749
        assert parse_legacy_hex("#bf0000").valence == Valence.NEUTRAL
        # 217/255 = 0.851
        assert parse_legacy_hex("#d90000").valence == Valence.POSITIVE

    @pytest.mark.parametrize(
        "value",
        ["#FFD70", "#FFD7000", "GGGGGG", "##FFD700", "#ff d70", "", "#"],
    )
    def test_invalid(self, value):
        assert parse_legacy_hex(value) is None

    def test_old_writer_output_decodes_to_same_point(self):
        for point in all_points():
            assert parse_legacy_hex(to_legacy_hex(point)) == point


class TestDecode:
    def test_canonical(self, joyful):
        assert decode("Yellow|2|2") == joyful

    def test_legacy(self, joyful):
        assert decode("#FFD700") == joyful

    def test_malformed_is_absent(self):
        assert decode("not-a-valid-string") is None

    def test_non_ascii_digits_are_absent(self):
        assert decode("Red|１|２") is None

    def test_none_and_empty(self):
        assert decode(None) is None
        assert decode("") is None

    def test_canonical_wins(self):
        # Six hex digits never contain a pipe, so there is no overlap;
        # a canonical string must come back tagged canonical.
        decoded = decode_mood("Blue|0|2")
        assert decoded == DecodedMood(
            EmotionPoint(Hue.BLUE, Energy.LOW, Valence.POSITIVE), MoodSource.CANONICAL
        )
        assert not decoded.is_legacy

    def test_legacy_is_tagged(self, joyful):
        decoded = decode_mood("#ffd700")
        assert decoded.point == joyful
        assert decoded.source is MoodSource.LEGACY
        assert decoded.is_legacy

    def test_decode_mood_absent(self):
        assert decode_mood("Yellow|2") is None

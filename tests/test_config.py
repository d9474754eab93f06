"""Tests for configuration loading."""

from moodjo.config import Config, load_config


def write_conf(tmp_path, text: str):
    path = tmp_path / "moodjo.conf"
    path.write_text(text)
    return path


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "missing.conf") == Config()

    def test_reads_keys(self, tmp_path):
        path = write_conf(
            tmp_path,
            "ENTRIES_DIR=~/journal/entries\n"
            "MEDIA_DIR=/srv/media\n"
            "MAX_IMAGES=3\n"
            "DATE_FORMAT=%Y-%m-%d\n",
        )
        config = load_config(path)
        assert config.entries_dir == "~/journal/entries"
        assert config.media_dir == "/srv/media"
        assert config.max_images == 3
        assert config.date_format == "%Y-%m-%d"

    def test_comments_and_blank_lines(self, tmp_path):
        path = write_conf(tmp_path, "# comment\n\nMAX_IMAGES=4 # inline\nnot a setting\n")
        assert load_config(path).max_images == 4

    def test_quoted_values(self, tmp_path):
        path = write_conf(
            tmp_path,
            'ENTRIES_DIR="/path/with # hash" # comment\n'
            "MEDIA_DIR='/single'\n",
        )
        config = load_config(path)
        assert config.entries_dir == "/path/with # hash"
        assert config.media_dir == "/single"

    def test_unterminated_quote(self, tmp_path):
        path = write_conf(tmp_path, 'ENTRIES_DIR="/open\n')
        assert load_config(path).entries_dir == "/open"

    def test_invalid_int_is_ignored(self, tmp_path):
        path = write_conf(tmp_path, "MAX_IMAGES=lots\n")
        assert load_config(path).max_images == 5

    def test_unknown_keys_ignored(self, tmp_path):
        path = write_conf(tmp_path, "SOMETHING_ELSE=1\n")
        assert load_config(path) == Config()

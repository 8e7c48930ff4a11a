"""Unit tests for settings loading."""

import pytest

from canvasfilter.config import CONFIG_DIR, CONFIG_FILE, Settings, load_settings
from canvasfilter.core.exceptions import ConfigError


def _write(root, text):
    config_dir = root / CONFIG_DIR
    config_dir.mkdir()
    (config_dir / CONFIG_FILE).write_text(text)


class TestLoadSettings:
    def test_defaults_when_missing(self, tmp_path):
        assert load_settings(tmp_path) == Settings()

    def test_reads_mode_and_resolves_vault(self, tmp_path):
        _write(tmp_path, "display_mode: fade\nvault: notes\n")
        settings = load_settings(tmp_path)
        assert settings.display_mode == "fade"
        assert settings.vault == tmp_path / "notes"

    def test_empty_file_is_defaults(self, tmp_path):
        _write(tmp_path, "")
        assert load_settings(tmp_path) == Settings()

    def test_invalid_yaml(self, tmp_path):
        _write(tmp_path, "display_mode: [unclosed\n")
        with pytest.raises(ConfigError):
            load_settings(tmp_path)

    def test_invalid_mode(self, tmp_path):
        _write(tmp_path, "display_mode: blur\n")
        with pytest.raises(ConfigError):
            load_settings(tmp_path)

    def test_non_mapping(self, tmp_path):
        _write(tmp_path, "- a\n- b\n")
        with pytest.raises(ConfigError):
            load_settings(tmp_path)

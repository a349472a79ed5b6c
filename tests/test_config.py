"""
Unit Tests for configuration loading.
"""

import pytest

from idif_auc.config import AnalysisConfig, load_config, save_config


class TestConfig:
    """YAML configuration."""

    def test_defaults(self):
        config = AnalysisConfig()
        assert config.windows.cutoff_a == 5.0
        assert config.windows.cutoff_b == 10.0
        assert config.parser.line_format == "separate"
        assert config.output.decimal_places == 4
        assert config.output.export_precision == 9

    def test_missing_file_gives_defaults(self, tmp_path):
        assert load_config(tmp_path / "nope.yaml") == AnalysisConfig()

    def test_overrides_and_unknown_keys(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "windows:\n"
            "  cutoff_b: 15\n"
            "  unknown: 1\n"
            "output:\n"
            "  decimal_places: 6\n"
        )
        config = load_config(path)
        assert config.windows.cutoff_a == 5.0
        assert config.windows.cutoff_b == 15
        assert config.output.decimal_places == 6
        assert not hasattr(config.windows, "unknown")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == AnalysisConfig()

    def test_bad_line_format(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("parser:\n  line_format: columns\n")
        with pytest.raises(ValueError, match="line_format"):
            load_config(path)

    def test_save_and_reload(self, tmp_path):
        config = AnalysisConfig()
        config.windows.cutoff_a = 2.5
        config.parser.line_format = "interleaved"
        path = tmp_path / "saved.yaml"

        save_config(config, path)

        assert load_config(path) == config
        assert AnalysisConfig.from_dict(config.to_dict()) == config

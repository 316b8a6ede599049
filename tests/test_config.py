"""
Tests for CommBoard Configuration
"""

from pathlib import Path

from commboard.config import Config, load_config, create_default_config


class TestConfig:
    """Tests for loading and validating configuration."""

    def test_missing_file_gives_defaults(self, tmp_path):
        """No file means default settings."""
        config = load_config(tmp_path / "absent.toml")

        assert config.board.name == "CommBoard"
        assert config.activity.max_items == 10
        assert config.validate() == []

    def test_load_sections(self, tmp_path):
        """TOML sections map onto the dataclasses."""
        path = tmp_path / "config.toml"
        path.write_text(
            '[board]\nname = "Maple Court"\n\n'
            '[storage]\npath = "/tmp/maple.db"\n\n'
            '[activity]\nper_collection = 2\nmax_items = 5\n'
        )

        config = load_config(path)

        assert config.board.name == "Maple Court"
        assert config.storage.path == "/tmp/maple.db"
        assert config.activity.per_collection == 2
        assert config.activity.recent_limit == 5
        assert config.crypto.argon2_time_cost == 3

    def test_save_and_reload(self, tmp_path):
        """A default config written to disk loads back equal."""
        path = tmp_path / "config.toml"
        create_default_config(path)

        assert load_config(path) == Config()

    def test_validate_errors(self):
        """Bad values are reported, not raised."""
        config = Config()
        config.board.name = ""
        config.activity.max_items = 0
        config.logging.level = "LOUD"
        config.crypto.argon2_memory_kb = 4

        errors = config.validate()

        assert any("board.name" in e for e in errors)
        assert any("activity.max_items" in e for e in errors)
        assert any("logging.level" in e for e in errors)
        assert any("argon2_memory_kb" in e for e in errors)

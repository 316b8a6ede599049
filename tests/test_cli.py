"""
Tests for the CommBoard command line
"""

import pytest

from commboard.__main__ import main


@pytest.fixture
def config_file(tmp_path):
    """Config pointing at a temporary database with cheap hashing."""
    path = tmp_path / "config.toml"
    path.write_text(
        f'[storage]\npath = "{(tmp_path / "board.db").as_posix()}"\n\n'
        '[crypto]\nargon2_time_cost = 1\nargon2_memory_kb = 8192\nargon2_parallelism = 1\n'
    )
    return str(path)


def run(config_file, *argv):
    return main(["--config", config_file, *argv])


class TestSessionCommands:
    """Tests for login/logout across invocations."""

    def test_login_persists_between_runs(self, config_file, capsys):
        """A login in one run is visible in the next."""
        assert run(config_file, "login", "admin@community.example", "--password", "admin123") == 0
        assert run(config_file, "whoami") == 0

        out = capsys.readouterr().out
        assert "Board Admin" in out
        assert "(admin)" in out

    def test_bad_login(self, config_file, capsys):
        """Wrong password exits non-zero with a generic message."""
        assert run(config_file, "login", "admin@community.example", "--password", "x") == 1
        assert "Invalid email or password" in capsys.readouterr().out

    def test_logout(self, config_file, capsys):
        """After logout whoami reports no session."""
        run(config_file, "login", "resident@community.example", "--password", "resident123")
        assert run(config_file, "logout") == 0
        assert run(config_file, "whoami") == 1
        assert "Not logged in." in capsys.readouterr().out


class TestBoardCommands:
    """Tests for page commands."""

    def test_post_and_list_announcement(self, config_file, capsys):
        """Posted announcements appear first in the listing."""
        run(config_file, "login", "resident@community.example", "--password", "resident123")
        assert run(
            config_file, "announcements", "post",
            "--title", "Lift outage", "--content", "Block B", "--priority", "high",
        ) == 0
        capsys.readouterr()

        assert run(config_file, "announcements") == 0
        lines = capsys.readouterr().out.splitlines()
        assert "Lift outage" in lines[0]

    def test_post_requires_login(self, config_file, capsys):
        """Anonymous posting fails."""
        assert run(
            config_file, "market", "post", "--title", "Sofa", "--description", "Old",
            "--category", "sell", "--contact", "555",
        ) == 1
        assert "login" in capsys.readouterr().out.lower()

    def test_market_search(self, config_file, capsys):
        """Search output includes category counts and matches."""
        assert run(config_file, "market", "--search", "bike") == 0
        out = capsys.readouterr().out

        assert "All (3)" in out
        assert "Bike - Excellent Condition" in out
        assert "Study Table" not in out

    def test_admin_requires_admin(self, config_file, capsys):
        """Non-admins cannot see stats."""
        run(config_file, "login", "resident@community.example", "--password", "resident123")
        assert run(config_file, "admin", "stats") == 1
        assert "admin privileges" in capsys.readouterr().out

    def test_admin_clear(self, config_file, capsys):
        """Admin clear with --yes removes custom content."""
        run(config_file, "login", "admin@community.example", "--password", "admin123")
        run(config_file, "announcements", "post", "--title", "Temp", "--content", "Body")
        assert run(config_file, "admin", "clear", "--yes") == 0
        capsys.readouterr()

        run(config_file, "announcements")
        assert "Temp" not in capsys.readouterr().out


class TestConfigCommand:
    """Tests for the config subcommand."""

    def test_validate(self, config_file, capsys):
        """The test config is valid."""
        assert run(config_file, "config", "--validate") == 0
        assert "valid" in capsys.readouterr().out

    def test_init_refuses_overwrite(self, config_file, capsys):
        """--init does not clobber an existing file."""
        assert run(config_file, "config", "--init") == 1

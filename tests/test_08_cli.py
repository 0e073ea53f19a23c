"""Test the command line interface."""

import pytest

from typeh import UNDEFINED, __version__
from typeh.cli import main, parse_value


@pytest.mark.cli
class TestCli:
    """Test typeh subcommands."""

    def test_version(self, capsys):
        """Test version output."""
        assert main(["version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_classify(self, capsys):
        """Test classify prints both kinds."""
        assert main(["classify", "12.5"]) == 0
        out = capsys.readouterr().out
        assert "coarse:  number" in out
        assert "refined: float" in out

    def test_check_match(self, capsys):
        """Test a matching value exits 0."""
        assert main(["check", "?int|float", "3"]) == 0
        assert "matches" in capsys.readouterr().out

    def test_check_mismatch(self, capsys):
        """Test a mismatch exits 1 with the error on stderr."""
        assert main(["check", "bool", "'yes'"]) == 1
        assert "[bool], [string] given" in capsys.readouterr().err

    def test_parse_value(self):
        """Test literal parsing."""
        assert parse_value("[1, 2]") == [1, 2]
        assert parse_value("None") is None
        assert parse_value("UNDEFINED") is UNDEFINED
        assert parse_value("hello world") == "hello world"

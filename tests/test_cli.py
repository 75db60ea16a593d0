"""
Command Line Tests

End-to-end tests of the propstore console script.

Run with: python -m pytest tests/test_cli.py -v
"""

from pathlib import Path

import pytest
from propstore.cli import main, parse_assignment


@pytest.mark.integration
class TestCli:
    """Test the propstore entry point."""

    def test_print_all(self, properties_path: Path, capsys):
        """Test the whole store is printed in key order."""
        assert main([str(properties_path)]) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == [
            "prop with spaces = value with spaces",
            "prop1 = val1",
            "prop2 = val2",
            "prop3 = val3",
            "prop4 = val4",
        ]

    def test_get(self, properties_path: Path, capsys):
        """Test --get prints only the requested keys."""
        assert main([str(properties_path), "--get", "prop2", "--get", "nope"]) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == ["prop2 = val2", "nope: not found"]

    def test_set_and_delete(self, properties_path: Path, capsys):
        """Test adding, updating and deleting properties in one run."""
        args = [
            str(properties_path),
            "--set", "run-time-1=value 1",
            "--set", "run-time-1=new value 1",
            "--set", "prop4=a=b",
            "--delete", "prop3",
        ]
        assert main(args) == 0

        out = capsys.readouterr().out
        assert "run-time-1 = new value 1" in out
        assert "prop4 = a=b" in out
        assert "prop3" not in out

    def test_delete_missing_is_not_fatal(self, properties_path: Path):
        """Test deleting an unknown key only warns."""
        assert main([str(properties_path), "--delete", "unknown"]) == 0

    def test_file_is_not_modified(self, tmp_path: Path):
        """Test changes stay in memory."""
        path = tmp_path / "app.properties"
        path.write_text("a = 1\n", encoding="utf-8")

        main([str(path), "--set", "b=2", "--delete", "a"])

        assert path.read_text(encoding="utf-8") == "a = 1\n"

    def test_missing_file(self, tmp_path: Path, capsys):
        """Test a load failure exits with status 1."""
        assert main([str(tmp_path / "missing.properties")]) == 1

        err = capsys.readouterr().err
        assert err.count("missing.properties") == 1
        assert err.startswith("propstore: cannot open")

    def test_unknown_encoding(self, properties_path: Path, monkeypatch, capsys):
        """Test a bad PROPSTORE_ENCODING exits with status 1 instead of a traceback."""
        monkeypatch.setattr("propstore.loader.settings.ENCODING", "no-such-codec")

        assert main([str(properties_path)]) == 1
        assert "no-such-codec" in capsys.readouterr().err

    def test_bad_set_argument(self, properties_path: Path):
        """Test a --set without '=' is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main([str(properties_path), "--set", "novalue"])

        assert exc_info.value.code == 2

    def test_example_file(self, capsys):
        """Test the bundled example file loads."""
        example = Path(__file__).parent.parent / "example" / "example.properties"

        assert main([str(example), "--get", "server.banner", "--get", "greeting"]) == 0

        out = capsys.readouterr().out
        assert out.splitlines() == [
            "server.banner = Welcome to the example server",
            "greeting = cafu00e9",
        ]


class TestParseAssignment:
    """Test KEY=VALUE argument parsing."""

    def test_split_on_first_equals(self):
        """Test only the first '=' separates key and value."""
        assert parse_assignment("a=b=c") == ("a", "b=c")

    def test_empty_value(self):
        """Test an empty value is allowed."""
        assert parse_assignment("a=") == ("a", "")

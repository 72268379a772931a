"""Test suite for CLI functionality."""

import json

import pytest

from pathguard import __version__
from pathguard.cli import EXIT_CONFIG, EXIT_OK, EXIT_UNSAFE, create_parser, main


def _json_rows(output):
    return [json.loads(line) for line in output.splitlines() if line.strip()]


class TestCLIParser:
    """Test CLI argument parsing."""

    def test_parser_creation(self):
        """Test that parser is created successfully."""
        parser = create_parser()
        assert parser.prog == "pathguard"

    def test_version_argument(self, capsys):
        """Test --version argument."""
        parser = create_parser()

        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["--version"])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_command_required(self):
        """Test a subcommand must be given."""
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args([])
        assert exc_info.value.code == 2

    def test_check_command_parsing(self):
        """Test check subcommand parsing."""
        args = create_parser().parse_args(["check", "a.txt", "b.txt"])
        assert args.command == "check"
        assert args.paths == ["a.txt", "b.txt"]
        assert args.from_file is None
        assert args.json_output is None

    def test_join_command_parsing(self):
        """Test join subcommand parsing."""
        args = create_parser().parse_args(["--json-output", "join", "/repo", "t", "/a.js", "--strict-target"])
        assert args.command == "join"
        assert (args.workdir, args.target, args.file) == ("/repo", "t", "/a.js")
        assert args.strict_target is True
        assert args.json_output is True

    def test_strict_target_defaults_to_none(self):
        """Test an omitted flag defers to settings."""
        args = create_parser().parse_args(["join", "/repo", "t", "a.js"])
        assert args.strict_target is None


class TestNormalizeCommand:
    """Tests for the normalize command."""

    def test_json_output(self, capsys):
        """Test each path produces one JSON line."""
        exit_code = main(["--json-output", "normalize", "a\\b//c", "./x/./y/"])

        assert exit_code == EXIT_OK
        rows = _json_rows(capsys.readouterr().out)
        assert [row["result"] for row in rows] == ["a/b/c", "x/y"]
        assert all(row["type"] == "normalize" for row in rows)

    def test_table_output(self, capsys):
        """Test the Rich table lists the normalized value."""
        assert main(["normalize", "a\\b"]) == EXIT_OK
        assert "a/b" in capsys.readouterr().out


class TestCheckCommand:
    """Tests for the check command."""

    def test_all_safe(self, capsys):
        """Test safe paths exit 0."""
        assert main(["--json-output", "check", "lib/a.js", "docs/readme.md"]) == EXIT_OK
        rows = _json_rows(capsys.readouterr().out)
        assert [row["status"] for row in rows] == ["ok", "ok"]

    def test_reports_every_violation(self, capsys):
        """Test an unsafe path lists all violated rules in order."""
        exit_code = main(["--json-output", "check", "../CON", "lib/a.js"])

        assert exit_code == EXIT_UNSAFE
        unsafe, safe = _json_rows(capsys.readouterr().out)
        assert unsafe["status"] == "unsafe"
        assert unsafe["code"] == "path_traversal"
        assert unsafe["violations"] == ["path_traversal", "reserved_name"]
        assert safe["status"] == "ok"

    def test_from_file(self, entries_file, capsys):
        """Test paths are read one per line from a file."""
        entries = entries_file(["lib/a.js", "file|pipe"])

        exit_code = main(["--json-output", "check", "--from-file", str(entries)])

        assert exit_code == EXIT_UNSAFE
        rows = _json_rows(capsys.readouterr().out)
        assert [row["input"] for row in rows] == ["lib/a.js", "file|pipe"]
        assert rows[1]["code"] == "invalid_characters"

    def test_from_file_with_crlf(self, tmp_path, capsys):
        """Test Windows line endings are not part of the path."""
        entries = tmp_path / "crlf.txt"
        entries.write_bytes(b"lib/a.js\r\ndocs/b.md\r\n")

        assert main(["--json-output", "check", "--from-file", str(entries), "c.txt"]) == EXIT_OK
        rows = _json_rows(capsys.readouterr().out)
        assert [row["input"] for row in rows] == ["c.txt", "lib/a.js", "docs/b.md"]

    def test_missing_input_file(self, tmp_path, capsys):
        """Test an unreadable --from-file is a usage error."""
        exit_code = main(["check", "--from-file", str(tmp_path / "missing.txt")])
        assert exit_code == EXIT_CONFIG
        assert "Cannot read input" in capsys.readouterr().err

    def test_no_paths(self, capsys):
        """Test calling check with nothing to check."""
        assert main(["check"]) == EXIT_CONFIG
        assert "No paths given" in capsys.readouterr().err


class TestSanitizeCommand:
    """Tests for the sanitize command."""

    def test_strips_leading_separator(self, capsys):
        """Test directory-content paths become relative."""
        assert main(["--json-output", "sanitize", "/args.js", "\\lib\\gen.js"]) == EXIT_OK
        rows = _json_rows(capsys.readouterr().out)
        assert [row["result"] for row in rows] == ["args.js", "lib/gen.js"]

    def test_failure_reports_raw_input(self, capsys):
        """Test rejected inputs keep going and report the raw path."""
        exit_code = main(["--json-output", "sanitize", "/lib/../../x", "ok.txt"])

        assert exit_code == EXIT_UNSAFE
        failed, ok = _json_rows(capsys.readouterr().out)
        assert failed["input"] == "/lib/../../x"
        assert failed["status"] == "error"
        assert failed["code"] == "path_traversal"
        assert ok["result"] == "ok.txt"

    def test_json_output_from_environment(self, monkeypatch, capsys):
        """Test PATHGUARD_JSON_OUTPUT switches the output mode."""
        monkeypatch.setenv("PATHGUARD_JSON_OUTPUT", "true")
        assert main(["sanitize", "a.txt"]) == EXIT_OK
        assert _json_rows(capsys.readouterr().out)[0]["result"] == "a.txt"


class TestJoinCommand:
    """Tests for the join command."""

    def test_contained_join(self, capsys):
        """Test the witness is printed."""
        assert main(["--json-output", "join", "/repo", "testing/framework", "/args.js"]) == EXIT_OK
        (row,) = _json_rows(capsys.readouterr().out)
        assert row["result"] == "/repo/testing/framework/args.js"
        assert row["workdir"] == "/repo"
        assert row["relative"] == "testing/framework/args.js"

    def test_escaping_target(self, capsys):
        """Test a '..' target fails containment by default."""
        assert main(["--json-output", "join", "/repo", "../other", "a.js"]) == EXIT_UNSAFE
        (row,) = _json_rows(capsys.readouterr().out)
        assert row["code"] == "escapes_containment"

    def test_strict_target_flag(self, capsys):
        """Test --strict-target reports the target's own violation."""
        exit_code = main(["--json-output", "join", "/repo", "../other", "a.js", "--strict-target"])
        assert exit_code == EXIT_UNSAFE
        (row,) = _json_rows(capsys.readouterr().out)
        assert row["code"] == "path_traversal"

    def test_strict_target_from_environment(self, monkeypatch, capsys):
        """Test PATHGUARD_STRICT_TARGET sets the default."""
        monkeypatch.setenv("PATHGUARD_STRICT_TARGET", "1")
        assert main(["--json-output", "join", "/repo", "/etc", "a.js"]) == EXIT_UNSAFE
        (row,) = _json_rows(capsys.readouterr().out)
        assert row["code"] == "absolute_path_not_allowed"


class TestConfiguration:
    """Tests for settings handling in main."""

    def test_invalid_configuration(self, monkeypatch, capsys):
        """Test a bad environment exits with the configuration code."""
        monkeypatch.setenv("PATHGUARD_LOG_LEVEL", "LOUD")
        assert main(["normalize", "a"]) == EXIT_CONFIG
        assert "log_level" in capsys.readouterr().err

    def test_log_dir_from_environment(self, monkeypatch, tmp_path):
        """Test PATHGUARD_LOG_DIR enables the log file."""
        log_dir = tmp_path / "logs"
        monkeypatch.setenv("PATHGUARD_LOG_DIR", str(log_dir))
        main(["--verbose", "sanitize", "../x"])
        assert (log_dir / "pathguard.log").exists()


class TestVerboseJsonOutput:
    """Tests for logging alongside machine-readable output."""

    def test_stdout_stays_json_lines(self, capsys):
        """Test DEBUG log records go to stderr, never into the JSON stream."""
        exit_code = main(["--verbose", "--json-output", "sanitize", "../etc/passwd", "/args.js"])

        assert exit_code == EXIT_UNSAFE
        captured = capsys.readouterr()
        rows = _json_rows(captured.out)
        assert [row["input"] for row in rows] == ["../etc/passwd", "/args.js"]
        assert "Rejected path" in captured.err

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_main_cli.py
"""Tests for the richmark command-line interface."""

import io
import json
import logging

import pytest

from richmark.cli import (
    EXIT_DEPENDENCY_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    create_parser,
    main,
)
from richmark.exceptions import DependencyError, ParsingError

pytest.importorskip("mistune")


@pytest.fixture(autouse=True)
def restore_richmark_logger():
    """Undo the logger changes made by main()."""
    richmark_logger = logging.getLogger("richmark")
    handlers = richmark_logger.handlers[:]
    level = richmark_logger.level
    yield
    for handler in richmark_logger.handlers:
        if handler not in handlers:
            handler.close()
    richmark_logger.handlers[:] = handlers
    richmark_logger.setLevel(level)


@pytest.fixture
def markdown_file(tmp_path):
    path = tmp_path / "doc.md"
    path.write_text("# Title\n\nHello *world*.\n\n- one\n- two\n", encoding="utf-8")
    return path


@pytest.mark.unit
@pytest.mark.cli
class TestCreateParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Test default argument values."""
        args = create_parser().parse_args(["doc.md"])
        assert args.input == "doc.md"
        assert args.dump is False
        assert args.config is None
        assert args.log_level == "WARNING"
        assert args.width is None

    def test_input_required(self):
        """Test the input argument is required."""
        with pytest.raises(SystemExit):
            create_parser().parse_args([])


@pytest.mark.unit
@pytest.mark.cli
class TestMain:
    """Tests for main()."""

    def test_dump(self, markdown_file, capsys):
        """Test --dump prints the rendered blocks as JSON."""
        assert main([str(markdown_file), "--dump", "--no-config"]) == EXIT_SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert [block["kind"] for block in data] == ["heading", "text", "list"]
        assert data[1]["attrs"]["text"] == "Hello world."

    def test_console_output(self, markdown_file, capsys):
        """Test rendering to the terminal."""
        pytest.importorskip("rich")
        assert main([str(markdown_file), "--no-config", "--width", "40"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Title" in out
        assert "Hello world." in out
        assert "one" in out

    def test_stdin(self, monkeypatch, capsys):
        """Test '-' reads Markdown from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("from stdin\n"))
        assert main(["-", "--dump", "--no-config"]) == EXIT_SUCCESS
        assert json.loads(capsys.readouterr().out)[0]["attrs"]["text"] == "from stdin"

    def test_parser_flags(self, tmp_path, capsys):
        """Test parsing flags reach the parser."""
        path = tmp_path / "table.md"
        path.write_text("| a |\n|---|\n| 1 |\n\nlast\n", encoding="utf-8")
        assert main([str(path), "--dump", "--no-config", "--no-tables", "--fade-out-last-paragraph"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert all(block["kind"] == "text" for block in data)
        assert data[-1]["attrs"]["fade_out_effect"] is True

    def test_missing_input(self, tmp_path, capsys):
        """Test an unreadable input file exits with the file error code."""
        assert main([str(tmp_path / "missing.md"), "--no-config"]) == EXIT_FILE_ERROR
        assert "could not read" in capsys.readouterr().err

    def test_non_utf8_input_file(self, tmp_path, capsys):
        """Test input that is not UTF-8 falls back to latin-1 instead of failing."""
        path = tmp_path / "latin1.md"
        path.write_bytes("café crème\n".encode("latin-1"))
        assert main([str(path), "--dump", "--no-config"]) == EXIT_SUCCESS
        assert json.loads(capsys.readouterr().out)[0]["attrs"]["text"] == "café crème"

    def test_utf8_bom_input_file(self, tmp_path, capsys):
        """Test a UTF-8 byte order mark is not part of the text."""
        path = tmp_path / "bom.md"
        path.write_bytes("\ufeffhello\n".encode("utf-8"))
        assert main([str(path), "--dump", "--no-config"]) == EXIT_SUCCESS
        assert json.loads(capsys.readouterr().out)[0]["attrs"]["text"] == "hello"

    def test_stdin_bytes(self, monkeypatch, capsys):
        """Test '-' decodes the raw bytes of stdin."""
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO("café\n".encode("latin-1"))))
        assert main(["-", "--dump", "--no-config"]) == EXIT_SUCCESS
        assert json.loads(capsys.readouterr().out)[0]["attrs"]["text"] == "café"

    def test_config_section_must_be_a_table(self, markdown_file, tmp_path, capsys):
        """Test a configuration section that is not a table is a validation error."""
        config = tmp_path / "scalar.json"
        config.write_text('{"parser": 3}', encoding="utf-8")
        assert main([str(markdown_file), "--dump", "--config", str(config)]) == EXIT_VALIDATION_ERROR
        assert "[parser]" in capsys.readouterr().err

    def test_invalid_config(self, markdown_file, tmp_path, capsys):
        """Test a bad configuration file exits with the validation error code."""
        config = tmp_path / "bad.toml"
        config.write_text("[console]\nunknown = 1\n", encoding="utf-8")
        assert main([str(markdown_file), "--config", str(config)]) == EXIT_VALIDATION_ERROR
        assert "Invalid configuration" in capsys.readouterr().err

    def test_config_from_environment(self, markdown_file, tmp_path, monkeypatch, capsys):
        """Test RICHMARK_CONFIG names the configuration file."""
        config = tmp_path / "env.toml"
        config.write_text("[parser]\nfade_out_last_paragraph = true\n", encoding="utf-8")
        monkeypatch.setenv("RICHMARK_CONFIG", str(config))
        assert main([str(markdown_file), "--dump"]) == EXIT_SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert data[1]["attrs"]["fade_out_effect"] is True

    def test_dependency_error(self, markdown_file, monkeypatch, capsys):
        """Test a missing dependency exits with the dependency error code."""

        def fail(*args, **kwargs):
            raise DependencyError("markdown parser", [("mistune", ">=3.0.0")])

        monkeypatch.setattr("richmark.api.parse_markdown", fail)
        assert main([str(markdown_file), "--no-config"]) == EXIT_DEPENDENCY_ERROR
        assert "mistune" in capsys.readouterr().err

    def test_parsing_error(self, markdown_file, monkeypatch):
        """Test a parsing failure exits with the parsing error code."""

        def fail(*args, **kwargs):
            raise ParsingError("cannot parse")

        monkeypatch.setattr("richmark.api.parse_markdown", fail)
        assert main([str(markdown_file), "--no-config"]) == EXIT_PARSING_ERROR

"""Unit tests for CLI utilities."""

import json
import logging

import pytest

from fqbn.cli_utils import BoardDetailsLoader, ErrorFormatter, configure_logging
from fqbn.errors import ConfigOptionError, InvalidFQBNError


class TestBoardDetailsLoader:
    """Tests for BoardDetailsLoader class."""

    def test_load_config_options(self, tmp_path):
        """Test loading the config options of a board details file."""
        path = tmp_path / "details.json"
        path.write_text(
            json.dumps(
                {
                    "fqbn": "esp32:esp32:esp32s3",
                    "config_options": [
                        {
                            "option": "CDCOnBoot",
                            "values": [
                                {"value": "default"},
                                {"value": "cdc", "selected": True},
                            ],
                        },
                        {
                            "option": "PartitionScheme",
                            "values": [{"value": "huge_app", "selected": True}],
                        },
                    ],
                }
            )
        )

        options = BoardDetailsLoader.load_config_options(path)

        assert [option.option for option in options] == ["CDCOnBoot", "PartitionScheme"]
        assert options[0].selected_values[0].value == "cdc"

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="not found"):
            BoardDetailsLoader.load_config_options(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON raises ValueError."""
        path = tmp_path / "details.json"
        path.write_text("[")
        with pytest.raises(ValueError, match="Failed to parse"):
            BoardDetailsLoader.load_config_options(path)


class TestErrorFormatter:
    """Tests for ErrorFormatter class."""

    def test_print_error(self, capsys):
        """Test errors are printed to stderr."""
        ErrorFormatter.print_error("Title", "Details")
        captured = capsys.readouterr()

        assert captured.out == ""
        assert "✗ Title" in captured.err
        assert "Details" in captured.err

    def test_handle_invalid_fqbn(self, capsys):
        """Test invalid FQBN errors exit with 1."""
        with pytest.raises(SystemExit) as exc_info:
            ErrorFormatter.handle_invalid_fqbn(InvalidFQBNError("a:b"))

        assert exc_info.value.code == 1
        assert "Error: Invalid FQBN" in capsys.readouterr().err

    def test_handle_config_option_error(self, capsys):
        """Test config option errors are reported with their detail."""
        with pytest.raises(SystemExit) as exc_info:
            ErrorFormatter.handle_invalid_fqbn(ConfigOptionError("a:b:c:", "Invalid config option: ''"))

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Error: Invalid config option" in err
        assert "Invalid FQBN: a:b:c: (Invalid config option: '')" in err

    def test_handle_unexpected_error_verbose(self, capsys):
        """Test the traceback is printed in verbose mode."""
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            with pytest.raises(SystemExit) as exc_info:
                ErrorFormatter.handle_unexpected_error(e, verbose=True)

        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "RuntimeError: boom" in err
        assert "Traceback" in err


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_does_not_replace_existing_handlers(self):
        """Test handlers installed by the host application are kept."""
        root = logging.getLogger()
        handler = logging.NullHandler()
        root.addHandler(handler)
        try:
            handlers = list(root.handlers)
            configure_logging(verbose=True)
            assert root.handlers == handlers
        finally:
            root.removeHandler(handler)

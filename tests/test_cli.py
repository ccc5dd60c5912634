"""
Tests for the barcode CLI.
"""

import pytest
from click.testing import CliRunner

from src.barcode.encoder import encode_module_pattern
from src.config import get_settings
from tools.barcode_cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def store_args(tmp_path):
    return ["--store", str(tmp_path / "barcode.json")]


class TestCodecCommands:
    """Tests for stateless codec commands."""

    def test_validate(self, runner, store_args):
        """Test a valid code is echoed grouped."""
        result = runner.invoke(cli, [*store_args, "validate", "4006381333931"])
        assert result.exit_code == 0
        assert "4-006381-33393-1 (checksum valid)" in result.output

    def test_validate_rejects(self, runner, store_args):
        """Test malformed codes exit with status 1."""
        result = runner.invoke(cli, [*store_args, "validate", "12345678901a3"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_validate_strict(self, runner, store_args):
        """Test strict mode rejects a bad check digit."""
        lenient = runner.invoke(cli, [*store_args, "validate", "4006381333932"])
        strict = runner.invoke(cli, [*store_args, "validate", "--strict", "4006381333932"])

        assert lenient.exit_code == 0
        assert "checksum invalid" in lenient.output
        assert strict.exit_code == 1

    def test_check_digit(self, runner, store_args):
        """Test check digit computation."""
        result = runner.invoke(cli, [*store_args, "check-digit", "400638133393"])
        assert result.exit_code == 0
        assert result.output.strip() == "1"

    def test_check_digit_rejects(self, runner, store_args):
        """Test a short body is rejected."""
        result = runner.invoke(cli, [*store_args, "check-digit", "4006"])
        assert result.exit_code == 1

    def test_format(self, runner, store_args):
        """Test grouped formatting and passthrough."""
        assert runner.invoke(cli, [*store_args, "format", "0123456789012"]).output.strip() == (
            "0-123456-78901-2"
        )
        assert runner.invoke(cli, [*store_args, "format", "12345"]).output.strip() == "12345"

    def test_encode_and_decode(self, runner, store_args):
        """Test encode prints the module pattern and decode reverses it."""
        pattern = encode_module_pattern("4006381333931")

        encoded = runner.invoke(cli, [*store_args, "encode", "4006381333931"])
        decoded = runner.invoke(cli, [*store_args, "decode", pattern])

        assert encoded.output.strip() == pattern
        assert decoded.output.strip() == "4006381333931"

    def test_encode_rejects(self, runner, store_args):
        """Test encode fails on malformed input."""
        result = runner.invoke(cli, [*store_args, "encode", "12345"])
        assert result.exit_code == 1

    def test_render(self, runner, store_args, tmp_path):
        """Test rendering writes a PNG of the expected size."""
        output = tmp_path / "barcode.png"
        result = runner.invoke(
            cli,
            [*store_args, "render", "4006381333931", "-o", str(output), "--caption"],
        )

        assert result.exit_code == 0
        assert "339x170" in result.output
        assert output.read_bytes().startswith(b"\x89PNG")

    def test_render_invalid_geometry(self, runner, store_args, tmp_path):
        """Test a zero module width is reported as an error."""
        output = tmp_path / "barcode.png"
        result = runner.invoke(
            cli,
            [*store_args, "render", "4006381333931", "-o", str(output), "--module-width", "0"],
        )

        assert result.exit_code == 1
        assert not output.exists()


class TestStoreCommands:
    """Tests for save, show and delete."""

    def test_save_show_delete(self, runner, store_args, tmp_path):
        """Test the stored barcode lifecycle."""
        saved = runner.invoke(cli, [*store_args, "save", "4006381333931", "--source", "scanner"])
        assert saved.exit_code == 0
        assert "Saved barcode: 4-006381-33393-1" in saved.output

        output = tmp_path / "stored.png"
        shown = runner.invoke(cli, [*store_args, "show", "-o", str(output)])
        assert shown.exit_code == 0
        assert "4-006381-33393-1" in shown.output
        assert "source scanner" in shown.output
        assert output.exists()

        deleted = runner.invoke(cli, [*store_args, "delete"])
        assert deleted.exit_code == 0

        assert runner.invoke(cli, [*store_args, "show"]).exit_code == 1
        assert runner.invoke(cli, [*store_args, "delete"]).exit_code == 1

    def test_save_rejects(self, runner, store_args, tmp_path):
        """Test invalid codes are not stored."""
        result = runner.invoke(cli, [*store_args, "save", "12345"])
        assert result.exit_code == 1
        assert not (tmp_path / "barcode.json").exists()

    def test_store_changes_logged_at_debug(self, runner, store_args, monkeypatch):
        """Test save and delete succeed and are logged when debug logging is on."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        get_settings.cache_clear()
        try:
            saved = runner.invoke(cli, [*store_args, "save", "4006381333931"])
            deleted = runner.invoke(cli, [*store_args, "delete"])
        finally:
            get_settings.cache_clear()

        assert saved.exit_code == 0
        assert "store_event=saved" in saved.output
        assert deleted.exit_code == 0
        assert "store_event=deleted" in deleted.output

    def test_show_output_invalid_geometry(self, runner, store_args, monkeypatch, tmp_path):
        """Test a bad configured geometry is reported when rendering the stored barcode."""
        assert runner.invoke(cli, [*store_args, "save", "4006381333931"]).exit_code == 0

        output = tmp_path / "stored.png"
        monkeypatch.setenv("RENDER_MODULE_WIDTH", "0")
        get_settings.cache_clear()
        try:
            result = runner.invoke(cli, [*store_args, "show", "-o", str(output)])
        finally:
            get_settings.cache_clear()

        assert result.exit_code == 1
        assert "Error" in result.output
        assert not output.exists()

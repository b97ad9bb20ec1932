"""Tests for CLI argument handling in main.py."""
from click.testing import CliRunner

from pnetstring.main import main


class TestCLIArguments:
    """Tests for command-line argument validation."""

    def test_no_mode_specified_exits_with_code_2(self):
        """Test that missing --encode or --decode gives usage error."""
        runner = CliRunner()
        result = runner.invoke(main, [])
        assert result.exit_code == 2
        assert "must be specified" in result.output

    def test_both_modes_specified_exits_with_code_2(self):
        """Test that both --encode and --decode gives usage error."""
        runner = CliRunner()
        result = runner.invoke(main, ["--encode", "--decode"])
        assert result.exit_code == 2
        assert "mutually exclusive" in result.output

    def test_decode_only_option_with_encode_exits_with_code_2(self):
        """Test that --max-length is refused in encode mode."""
        runner = CliRunner()
        result = runner.invoke(main, ["--encode", "--max-length", "5"])
        assert result.exit_code == 2
        assert "requires --decode" in result.output

    def test_negative_max_length_exits_with_code_2(self):
        """Test that a negative ceiling is rejected by option parsing."""
        runner = CliRunner()
        result = runner.invoke(main, ["--decode", "--max-length", "-1"])
        assert result.exit_code == 2

    def test_help_exits_with_code_0(self):
        """Test that --help exits cleanly with code 0."""
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "encode" in result.output.lower()
        assert "decode" in result.output.lower()


class TestCLIModes:
    """Tests for encode and decode runs."""

    def test_encode_stdin(self):
        """Test encoding stdin to stdout."""
        runner = CliRunner()
        result = runner.invoke(main, ["--encode"], input=b"hello world")
        assert result.exit_code == 0
        assert result.stdout_bytes == b"11:hello world,"

    def test_decode_stdin_with_newlines(self):
        """Test decoding several netstrings from stdin."""
        runner = CliRunner()
        result = runner.invoke(main, ["--decode", "--newline"], input=b"1:a,2:bc,")
        assert result.exit_code == 0
        assert result.stdout_bytes == b"a\nbc\n"

    def test_round_trip_through_files(self, tmp_path):
        """Test encoding to a file and decoding it back."""
        original = tmp_path / "original.bin"
        encoded = tmp_path / "encoded.ns"
        decoded = tmp_path / "decoded.bin"
        original.write_bytes(b"\x00binary:,\xff")
        runner = CliRunner()
        result = runner.invoke(
            main, ["--encode", "--input", str(original), "--output", str(encoded)]
        )
        assert result.exit_code == 0
        result = runner.invoke(
            main, ["--decode", "--input", str(encoded), "--output", str(decoded)]
        )
        assert result.exit_code == 0
        assert decoded.read_bytes() == b"\x00binary:,\xff"

    def test_truncated_input_exits_with_code_1(self):
        """Test input ending mid-netstring reports an error."""
        runner = CliRunner()
        result = runner.invoke(main, ["--decode"], input=b"5:hel")
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_too_large_exits_with_code_1(self):
        """Test the ceiling is enforced from the command line."""
        runner = CliRunner()
        result = runner.invoke(main, ["--decode", "--max-length", "3"], input=b"5:hello,")
        assert result.exit_code == 1
        assert "exceeds limit 3" in result.output

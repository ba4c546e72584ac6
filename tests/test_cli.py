"""Tests for the CLI implementation."""

import json
import shutil

import pytest
from typer.testing import CliRunner

from source_reader.cli import app


class TestCLI:
    """Test the CLI functionality."""

    @pytest.fixture
    def runner(self):
        """CLI test runner."""
        return CliRunner()

    @pytest.fixture
    def files(self, tmp_path):
        first = tmp_path / "first.txt"
        second = tmp_path / "second.txt"
        first.write_bytes(b"hello ")
        second.write_bytes(b"world\n")
        return first, second

    def test_concatenates_sources(self, runner, files):
        result = runner.invoke(app, [str(files[0]), str(files[1])])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"hello world\n"

    def test_stdin_dash(self, runner, files):
        result = runner.invoke(app, [str(files[0]), "-"], input=b"from stdin")

        assert result.exit_code == 0
        assert result.stdout_bytes == b"hello from stdin"

    def test_remote_source(self, runner, httpserver):
        httpserver.expect_request("/remote.bin").respond_with_data(b"\x00remote\xff")
        result = runner.invoke(app, [httpserver.url_for("/remote.bin")])

        assert result.exit_code == 0
        assert result.stdout_bytes == b"\x00remote\xff"

    def test_info_single_source(self, runner, files):
        result = runner.invoke(app, ["--info", str(files[0])])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload == {
            "source": str(files[0]),
            "kind": "local",
            "filename": "first.txt",
            "success": True,
            "bytes_read": 6,
        }

    def test_info_jsonl(self, runner, files, httpserver):
        httpserver.expect_request("/dir/remote.bin").respond_with_data(b"12345")
        url = httpserver.url_for("/dir/remote.bin")
        result = runner.invoke(app, ["--info", str(files[1]), url])

        assert result.exit_code == 0
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 2
        remote = json.loads(lines[1])
        assert remote["kind"] == "remote"
        assert remote["filename"] == "remote.bin"
        assert remote["bytes_read"] == 5

    def test_info_force_jsonl(self, runner, files):
        result = runner.invoke(app, ["--info", "--jsonl", str(files[0])])

        assert result.exit_code == 0
        assert len(result.stdout.strip().splitlines()) == 1

    def test_missing_file_exit_code(self, runner, files, tmp_path):
        missing = tmp_path / "missing.txt"
        result = runner.invoke(app, ["--info", "--jsonl", str(files[0]), str(missing)])

        assert result.exit_code == 1
        lines = result.stdout.strip().splitlines()
        assert json.loads(lines[0])["success"] is True
        failed = json.loads(lines[1])
        assert failed["success"] is False
        assert "No such file or directory" in failed["error"]

    def test_missing_file_still_writes_others(self, runner, files, tmp_path):
        result = runner.invoke(app, [str(tmp_path / "missing.txt"), str(files[1])])

        assert result.exit_code == 1
        assert b"world\n" in result.stdout_bytes

    def test_output_file_option(self, runner, files, tmp_path):
        out = tmp_path / "out.bin"
        result = runner.invoke(app, ["-o", str(out), str(files[0]), str(files[1])])

        assert result.exit_code == 0
        assert result.stdout == ""
        assert out.read_bytes() == b"hello world\n"

    def test_no_sources(self, runner):
        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "No input sources given." in result.output

    def test_large_source_is_copied_in_chunks(self, runner, tmp_path, monkeypatch):
        big = tmp_path / "big.bin"
        payload = bytes(range(256)) * 1024
        big.write_bytes(payload)
        copies = []
        real_copy = shutil.copyfileobj

        def tracking_copy(src, dst, *args, **kwargs):
            copies.append(src)
            return real_copy(src, dst, *args, **kwargs)

        monkeypatch.setattr(shutil, "copyfileobj", tracking_copy)
        result = runner.invoke(app, [str(big)])

        assert result.exit_code == 0
        assert result.stdout_bytes == payload
        assert len(copies) == 1
        assert copies[0].closed

    def test_info_counts_streamed_bytes(self, runner, httpserver):
        payload = b"x" * (200 * 1024)
        httpserver.expect_request("/big.bin").respond_with_data(payload)
        result = runner.invoke(app, ["--info", httpserver.url_for("/big.bin")])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["bytes_read"] == len(payload)

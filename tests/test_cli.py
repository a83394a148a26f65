"""Tests for the command-line entry point."""

import sys

import pytest
import rovers


@pytest.fixture(autouse=True)
def restore_hooks(tmp_path, monkeypatch):
    """main() installs a crash handler and reconfigures logging."""
    from internal import logging as log_module
    from utils import crash
    original_hook, original_logger, original_crash = sys.excepthook, log_module._logger, crash._crash_log
    monkeypatch.chdir(tmp_path)
    yield
    sys.excepthook, log_module._logger = original_hook, original_logger
    crash.configure(original_crash)


class TestRunFile:

    def test_prints_output(self, tmp_path, capsys, classic_input):
        path = tmp_path / "input.txt"
        path.write_text(classic_input)
        assert rovers.run_file(path) == 0
        assert capsys.readouterr().out == "1 1 E \n3 3 N LOST\n2 3 S \n"

    def test_missing_file(self, tmp_path, capsys):
        """Read failures print a generic message."""
        assert rovers.run_file(tmp_path / "missing.txt") == 1
        assert capsys.readouterr().out.startswith("Unexpected error: ")

    def test_malformed_input(self, tmp_path, capsys):
        path = tmp_path / "input.txt"
        path.write_text("a b\n\n1 1 E\nF")
        assert rovers.run_file(path) == 1
        out = capsys.readouterr().out
        assert "malformed dimension line" in out
        assert out.rstrip().endswith(".")


class TestMain:

    def test_explicit_file(self, tmp_path, capsys):
        path = tmp_path / "mission.txt"
        path.write_text("5 5\n\n1 2 N\nLFLFLFLFF")
        assert rovers.main([str(path), "--log-level", "ERROR"]) == 0
        assert capsys.readouterr().out == "1 3 N \n"

    def test_default_file_from_config(self, tmp_path, capsys):
        """Without an argument the configured input file is read from the working directory."""
        (tmp_path / "input.txt").write_text("3 3\nFFR")
        assert rovers.main(["--log-level", "ERROR"]) == 0
        assert capsys.readouterr().out == "0 2 E \n"

    def test_config_option(self, tmp_path, capsys):
        (tmp_path / "robots.txt").write_text("3 3\nRF")
        (tmp_path / "custom.json").write_text(
            '{"mars": {"input_file": "robots.txt"}, "logging": {"crash_file": "crash.log"}}')
        assert rovers.main(["--config", str(tmp_path / "custom.json")]) == 0
        assert capsys.readouterr().out == "1 0 E \n"

    def test_installs_crash_handler(self, tmp_path):
        from utils.crash import log_crash
        (tmp_path / "input.txt").write_text("1 1")
        rovers.main(["--log-level", "ERROR"])
        assert sys.excepthook is log_crash

    def test_failure_exit_status(self, capsys):
        assert rovers.main(["missing.txt", "--log-level", "ERROR"]) == 1
        assert "Unexpected error" in capsys.readouterr().out

    def test_serve_uses_config(self, monkeypatch):
        calls = {}

        def fake_serve(config, host, port):
            calls.update(config=config, host=host, port=port)

        monkeypatch.setattr(rovers, "serve", fake_serve)
        assert rovers.main(["--serve", "--port", "9001", "--log-level", "ERROR"]) == 0
        assert calls["port"] == 9001
        assert calls["host"] is None
        assert calls["config"].server.port == 8080

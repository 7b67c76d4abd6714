"""Tests for the command-line interface."""

import json

import pytest

from colormixer.cli import main
from conftest import run_in_thread


class TestMixCommand:
    def test_default(self, capsys, monkeypatch):
        monkeypatch.delenv("COLORMIXER_INITIAL_COLOR", raising=False)
        main(["mix"])
        out = capsys.readouterr().out
        assert "HEX: #FF5733" in out
        assert "RGB: rgb(255, 87, 51)" in out

    def test_preset_and_channels(self, capsys):
        main(["mix", "--preset", "red", "--g", "300", "--copy", "hex"])
        out = capsys.readouterr().out
        assert "HEX: #FFFF00" in out
        assert "Copied: #FFFF00" in out

    def test_json(self, capsys):
        main(["mix", "--start", "#000000", "--b", "128", "--copy", "rgb", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["hex"] == "#000080"
        assert data["copied"] == "rgb(0, 0, 128)"

    def test_unknown_preset_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["mix", "--preset", "purple"])
        assert exc_info.value.code == 1
        assert "Unknown preset" in capsys.readouterr().out

    def test_strict_rejects(self, capsys):
        with pytest.raises(SystemExit):
            main(["mix", "--r", "256", "--strict"])
        assert "outside 0-255" in capsys.readouterr().out


class TestOtherCommands:
    def test_presets(self, capsys):
        main(["presets"])
        out = capsys.readouterr().out
        assert "yellow   #FFFF00  rgb(255, 255, 0)" in out
        assert len(out.strip().splitlines()) == 6

    def test_no_command(self):
        with pytest.raises(SystemExit):
            main([])


@pytest.mark.slow
class TestCheckCommand:
    """check drives a real browser, so main runs on its own thread."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("COLORMIXER_INITIAL_COLOR", "COLORMIXER_READER", "COLORMIXER_CHANNEL_POLICY"):
            monkeypatch.delenv(name, raising=False)

    def test_passing_app(self, chromium_available, mixer_url, capsys, tmp_path):
        report = tmp_path / "report.txt"
        _, error = run_in_thread(
            main,
            ["check", mixer_url, "--preset", "red", "--preset", "white", "--report", str(report)],
        )

        out = capsys.readouterr().out
        assert error is None, out
        assert "✅ initial color #FF5733" in out
        assert "✅ preset red -> #FF0000" in out
        assert "✅ preset white -> #FFFFFF" in out
        assert "✅ copy hex -> #FFFFFF" in out
        assert "✅ All checks passed" in out
        assert report.exists()

    def test_unreachable_app(self, chromium_available, capsys):
        """Browser errors end in an error line and exit status 1, not a traceback."""
        _, error = run_in_thread(main, ["check", "http://127.0.0.1:9/", "--timeout", "2"])

        assert isinstance(error, SystemExit)
        assert error.code == 1
        assert "❌ Error" in capsys.readouterr().out

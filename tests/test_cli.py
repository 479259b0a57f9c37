"""Tests for the console launcher."""
import sys

import pytest

from physio_dashboard import cli


class TestLauncher:

    @pytest.fixture
    def captured(self, monkeypatch):
        seen = {}

        def fake_main():
            seen["argv"] = list(sys.argv)
            return 0

        monkeypatch.setattr(cli.stcli, "main", fake_main)
        return seen

    def test_runs_packaged_app(self, captured, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["physio-dashboard"])
        with pytest.raises(SystemExit) as exc:
            cli.main()
        assert exc.value.code == 0
        assert captured["argv"] == ["streamlit", "run", str(cli.APP_PATH)]
        assert cli.APP_PATH.name == "app.py"
        assert cli.APP_PATH.exists()

    def test_forwards_extra_arguments(self, captured, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["physio-dashboard", "--server.port", "8600"])
        with pytest.raises(SystemExit):
            cli.main()
        assert captured["argv"][3:] == ["--server.port", "8600"]

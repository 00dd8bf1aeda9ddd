# ABOUTME: Tests for environment-driven settings.
# ABOUTME: Reloads the config module under a patched environment.

import importlib

import src.config


class TestDayEndMarker:
    def test_defaults_to_last_three_hour_slot(self, monkeypatch):
        monkeypatch.delenv("FORECAST_DAY_END_MARKER", raising=False)
        assert importlib.reload(src.config).DAY_END_MARKER == "21:00:00"

    def test_overridden_by_environment(self, monkeypatch):
        """FORECAST_DAY_END_MARKER replaces the default marker.

        Implementation: Sets the variable and reloads the module, then restores it.
        Passing implies: Deployments can move the day boundary without code changes.
        """
        monkeypatch.setenv("FORECAST_DAY_END_MARKER", "18:00:00")
        try:
            assert importlib.reload(src.config).DAY_END_MARKER == "18:00:00"
        finally:
            monkeypatch.delenv("FORECAST_DAY_END_MARKER")
            importlib.reload(src.config)

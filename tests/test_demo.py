"""Tests for the console demo."""

import pytest
from unittest.mock import MagicMock, patch

from appsettings.core import ApplicationData, set_application_data
from appsettings.demo import DemoConfig, format_settings, main, parse_assignment


@pytest.fixture
def demo_env(monkeypatch, tmp_path):
    monkeypatch.setenv("APPSETTINGS_LOCAL_DIR", str(tmp_path / "local"))
    monkeypatch.setenv("APPSETTINGS_ROAMING_DIR", str(tmp_path / "roaming"))
    set_application_data(None)
    with patch("appsettings.demo.QCoreApplication", MagicMock()), \
            patch("appsettings.demo.setup_logging"):
        yield tmp_path
    DemoConfig.reset_instance()
    set_application_data(None)


def _config():
    return DemoConfig(ApplicationData.in_memory())


class TestParseAssignment:

    def test_by_attribute_name(self):
        assert parse_assignment(_config(), "theme=dark") == ("theme", "dark")

    def test_by_storage_key(self):
        assert parse_assignment(_config(), "FontSize=14") == ("FontSize", 14)

    def test_attribute_name_maps_to_key(self):
        assert parse_assignment(_config(), "font_size=14") == ("FontSize", 14)

    @pytest.mark.parametrize("raw, expected", [
        ("on", True), ("true", True), ("1", True),
        ("off", False), ("False", False), ("no", False),
    ])
    def test_bool_values(self, raw, expected):
        assert parse_assignment(_config(), f"show_tips={raw}") == ("show_tips", expected)

    def test_value_may_contain_equals(self):
        assert parse_assignment(_config(), "DeviceId=a=b") == ("DeviceId", "a=b")

    @pytest.mark.parametrize("text", [
        "theme",
        "=dark",
        "missing=1",
        "FontSize=big",
        "show_tips=maybe",
    ])
    def test_rejects(self, text):
        with pytest.raises(ValueError):
            parse_assignment(_config(), text)


class TestFormatSettings:

    def test_lists_every_setting(self):
        config = _config()
        config.theme = "dark"
        lines = format_settings(config)

        assert len(lines) == len(DemoConfig.declared_settings())
        theme_line = next(line for line in lines if line.startswith("theme "))
        assert "roaming" in theme_line
        assert "'dark'" in theme_line
        device_line = next(line for line in lines if line.startswith("DeviceId"))
        assert "local" in device_line


class TestMain:

    def test_memory_set_and_print(self, demo_env, capsys):
        assert main(["--memory", "--set", "theme=dark", "--set", "FontSize=12"]) == 0
        out = capsys.readouterr().out
        assert "'dark'" in out
        assert "12" in out
        assert not (demo_env / "local").exists()

    def test_roaming_off(self, demo_env, capsys):
        assert main(["--memory", "--roaming", "off"]) == 0
        out = capsys.readouterr().out
        roaming_line = next(line for line in out.splitlines() if line.startswith("RoamingEnabled"))
        assert "False" in roaming_line

    def test_bad_assignment(self, demo_env, capsys):
        assert main(["--memory", "--set", "nope=1"]) == 2
        assert "Unknown setting" in capsys.readouterr().err

    def test_persists_to_settings_files(self, demo_env, capsys):
        assert main(["--set", "theme=dark", "--set", "DeviceId=abc"]) == 0

        assert (demo_env / "roaming" / "settings.ini").exists()
        assert "theme=dark" in (demo_env / "roaming" / "settings.ini").read_text()
        assert "DeviceId=abc" in (demo_env / "local" / "settings.ini").read_text()

    def test_values_read_back_on_next_run(self, demo_env, capsys):
        main(["--set", "FontSize=16"])
        capsys.readouterr()

        set_application_data(None)
        assert main([]) == 0
        out = capsys.readouterr().out
        font_line = next(line for line in out.splitlines() if line.startswith("FontSize"))
        assert "16" in font_line

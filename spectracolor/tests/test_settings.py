import os
from unittest import mock
from django.test import SimpleTestCase
from pydantic import ValidationError

from ..config.logging import build_logging_config
from ..config.settings import Settings


class SettingsTest(SimpleTestCase):

    def test_defaults(self):
        settings = Settings()
        assert settings.default_illuminant == "D65"
        assert settings.default_observer == "2"
        assert settings.apply_gamma_correction is True
        assert (settings.visible_min_nm, settings.visible_max_nm) == (380.0, 780.0)
        assert settings.white_point_step_nm == 1.0

    def test_keys_are_normalised(self):
        settings = Settings(default_illuminant=" f11 ", default_observer=10, log_level="debug")
        assert settings.default_illuminant == "F11"
        assert settings.default_observer == "10"
        assert settings.log_level == "DEBUG"

    def test_environment_variables(self):
        with mock.patch.dict(os.environ, {"SPECTRACOLOR_DEFAULT_ILLUMINANT": "C", "SPECTRACOLOR_DEBUG": "true"}):
            settings = Settings()
        assert settings.default_illuminant == "C"
        assert settings.debug is True

    def test_invalid_values(self):
        for overrides in [
            {"default_illuminant": "D93"},
            {"default_observer": "4"},
            {"environment": "qa"},
            {"log_level": "VERBOSE"},
            {"white_point_step_nm": 0},
            {"visible_min_nm": 780, "visible_max_nm": 380},
            {"visible_min_nm": 500, "visible_max_nm": 500},
        ]:
            with self.assertRaises(ValidationError, msg=str(overrides)):
                Settings(**overrides)


class LoggingConfigTest(SimpleTestCase):

    def test_console_only_by_default(self):
        config = build_logging_config(Settings(log_dir=None))
        assert list(config["handlers"]) == ["console"]
        assert config["loggers"]["spectracolor"]["handlers"] == ["console"]

    def test_json_file_handler(self):
        config = build_logging_config(Settings(log_dir="/tmp/spectracolor-logs", log_level="warning"))
        assert config["handlers"]["file"]["formatter"] == "json"
        assert config["handlers"]["file"]["filename"] == os.path.join("/tmp/spectracolor-logs", "spectracolor.log")
        assert config["loggers"]["spectracolor"]["level"] == "WARNING"

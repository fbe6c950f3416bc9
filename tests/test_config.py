from __future__ import annotations

import io
import logging
import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from callable_tour.config import Settings, load_settings
from callable_tour.console import LOGGER_NAME, heading, setup_logging
from callable_tour.exceptions import ConfigurationError


class LoadSettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        self.assertEqual(load_settings({}), Settings())

    def test_reads_environment(self) -> None:
        settings = load_settings(
            {
                "CALLABLE_TOUR_ITERATIONS": "3",
                "CALLABLE_TOUR_DELAY": "0",
                "CALLABLE_TOUR_LOG_LEVEL": "debug",
                "CALLABLE_TOUR_COLOR": "off",
            }
        )
        self.assertEqual(settings, Settings(iterations=3, delay=0.0, log_level="DEBUG", color=False))

    def test_no_color_wins(self) -> None:
        settings = load_settings({"NO_COLOR": "", "CALLABLE_TOUR_COLOR": "1"})
        self.assertFalse(settings.color)

    def test_invalid_values(self) -> None:
        for env in (
            {"CALLABLE_TOUR_ITERATIONS": "many"},
            {"CALLABLE_TOUR_ITERATIONS": "-1"},
            {"CALLABLE_TOUR_DELAY": "soon"},
            {"CALLABLE_TOUR_DELAY": "-0.5"},
            {"CALLABLE_TOUR_DELAY": "nan"},
            {"CALLABLE_TOUR_DELAY": "inf"},
            {"CALLABLE_TOUR_LOG_LEVEL": "LOUD"},
        ):
            with self.subTest(env=env):
                with self.assertRaises(ConfigurationError):
                    load_settings(env)

    def test_configuration_error_is_value_error(self) -> None:
        with self.assertRaises(ValueError):
            load_settings({"CALLABLE_TOUR_DELAY": "x"})


class HeadingTests(unittest.TestCase):
    def test_plain_heading(self) -> None:
        self.assertEqual(heading("multicast", color=False), "== Running multicast ==")

    def test_coloured_heading_wraps_plain_text(self) -> None:
        self.assertIn("== Running multicast ==", heading("multicast", color=True))


class SetupLoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        logging.getLogger(LOGGER_NAME).handlers.clear()

    def emit_each_level(self, **kwargs) -> tuple[str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            logger = setup_logging(logging.DEBUG, **kwargs)
            for level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR):
                logger.log(level, "at %s", logging.getLevelName(level))
        return out.getvalue(), err.getvalue()

    def test_default_split_at_info(self) -> None:
        out, err = self.emit_each_level()
        self.assertEqual(out.splitlines(), ["DEBUG:at DEBUG", "INFO:at INFO"])
        self.assertEqual(err.splitlines(), ["WARNING:at WARNING", "ERROR:at ERROR"])

    def test_custom_split_drops_nothing(self) -> None:
        out, err = self.emit_each_level(stdout_max_level=logging.DEBUG)
        self.assertEqual(out.splitlines(), ["DEBUG:at DEBUG"])
        self.assertEqual(err.splitlines(), ["INFO:at INFO", "WARNING:at WARNING", "ERROR:at ERROR"])

    def test_repeated_setup_does_not_stack_handlers(self) -> None:
        setup_logging()
        self.assertEqual(len(setup_logging().handlers), 2)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

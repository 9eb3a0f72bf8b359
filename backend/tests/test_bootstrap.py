import os
import tempfile
import unittest
from unittest.mock import patch

from sqlalchemy import inspect

import config
from workout_bot import __main__ as entrypoint
from workout_bot.bootstrap import build_store, check_config
from workout_bot.errors import ConfigError
from workout_bot.models import Exercise


class TestBootstrap(unittest.TestCase):
    def test_missing_required_settings(self):
        with patch.object(config, "DATABASE_URL", None), patch.object(config, "TELEGRAM_BOT_TOKEN", ""):
            with self.assertRaises(ConfigError) as ctx:
                check_config()
        self.assertIn("DATABASE_URL", str(ctx.exception))
        self.assertIn("TELEGRAM_BOT_TOKEN", str(ctx.exception))

    def test_default_secret_is_allowed_but_warned(self):
        with patch.object(config, "DATABASE_URL", "sqlite://"), \
                patch.object(config, "TELEGRAM_BOT_TOKEN", "t"), \
                patch.object(config, "JWT_SECRET", config.DEFAULT_JWT_SECRET):
            with self.assertLogs("workout_bot.bootstrap", level="WARNING"):
                check_config()

    def test_build_store_creates_schema_and_seeds(self):
        store = build_store("sqlite:///:memory:")
        engine = store.session_factory.kw["bind"]
        try:
            tables = set(inspect(engine).get_table_names())
            self.assertTrue({"users", "exercises", "workouts", "workout_exercises", "alembic_version"} <= tables)
            self.assertEqual(store.count(Exercise), 5)
        finally:
            engine.dispose()

    def test_broken_migration_is_logged_and_falls_back(self):
        with patch("workout_bot.bootstrap.ALEMBIC_INI", "/nonexistent/alembic.ini"):
            with self.assertLogs("workout_bot.bootstrap", level="ERROR") as logs:
                store = build_store("sqlite:///:memory:")
        engine = store.session_factory.kw["bind"]
        try:
            self.assertTrue(any("Migration failed" in line for line in logs.output))
            self.assertIn("workout_exercises", inspect(engine).get_table_names())
            self.assertEqual(store.count(Exercise), 5)
        finally:
            engine.dispose()

    def test_restart_does_not_reseed(self):
        with tempfile.TemporaryDirectory() as tmp:
            url = f"sqlite:///{os.path.join(tmp, 'workouts.db')}"
            first = build_store(url)
            second = build_store(url)
            try:
                self.assertEqual(second.count(Exercise), 5)
            finally:
                first.session_factory.kw["bind"].dispose()
                second.session_factory.kw["bind"].dispose()

    def test_unreachable_database_is_fatal(self):
        with self.assertRaises(ConfigError):
            build_store("sqlite:////nonexistent-dir/nested/workouts.db")
        with self.assertRaises(ConfigError):
            build_store("nosuchdialect://localhost/db")

    def test_entrypoint_exits_on_config_error(self):
        with patch.object(entrypoint, "configure_logging"), \
                patch.object(entrypoint, "check_config", side_effect=ConfigError("DATABASE_URL is required")):
            self.assertEqual(entrypoint.main(), 1)


if __name__ == '__main__':
    unittest.main()

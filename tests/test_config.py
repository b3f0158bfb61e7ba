"""Tests for configuration loading helpers."""

import json
import logging
import os
import tempfile
import unittest

from pokerdisplay.cards import Suit
from pokerdisplay.config import Config
from pokerdisplay.icons import LOWER_HALVES, UPPER_HALVES, IconTableError
from pokerdisplay.markup import DiscordMarkup, TelegramMarkup
from pokerdisplay.messages import MessageBuilder
from pokerdisplay.renderer import CardGridRenderer


class ConfigEnvTestCase(unittest.TestCase):
    """Ensure config-related environment variables are isolated per test."""

    def setUp(self) -> None:  # noqa: D401 - short description inherited
        self._original_env = {
            key: os.environ[key]
            for key in os.environ
            if key.startswith("POKERDISPLAY_")
        }
        for key in list(os.environ):
            if key.startswith("POKERDISPLAY_"):
                del os.environ[key]

    def tearDown(self) -> None:
        for key in list(os.environ):
            if key.startswith("POKERDISPLAY_"):
                del os.environ[key]
        for key, value in self._original_env.items():
            os.environ[key] = value


class TestConfig(ConfigEnvTestCase):
    def test_defaults(self) -> None:
        cfg = Config()

        self.assertEqual(cfg.PLATFORM, "discord")
        self.assertEqual(cfg.GAP_WIDTH, 3)
        self.assertEqual(cfg.COMMUNITY_SLOTS, 5)
        self.assertFalse(cfg.DEBUG)
        self.assertEqual(cfg.log_level, logging.INFO)
        self.assertIsInstance(cfg.markup(), DiscordMarkup)
        self.assertEqual(cfg.icon_tables(), (UPPER_HALVES, LOWER_HALVES))
        cfg.validate()

    def test_platform_normalised(self) -> None:
        os.environ["POKERDISPLAY_PLATFORM"] = "  Telegram "

        cfg = Config()

        self.assertEqual(cfg.PLATFORM, "telegram")
        self.assertIsInstance(cfg.markup(), TelegramMarkup)

    def test_unknown_platform_rejected(self) -> None:
        os.environ["POKERDISPLAY_PLATFORM"] = "irc"

        with self.assertRaises(ValueError):
            Config()

    def test_debug_flag(self) -> None:
        os.environ["POKERDISPLAY_DEBUG"] = "yes"

        cfg = Config()

        self.assertTrue(cfg.DEBUG)
        self.assertEqual(cfg.log_level, logging.DEBUG)

    def test_non_numeric_gap_width_rejected(self) -> None:
        os.environ["POKERDISPLAY_GAP_WIDTH"] = "wide"

        with self.assertRaises(ValueError):
            Config()

    def test_validate_rejects_zero_gap(self) -> None:
        os.environ["POKERDISPLAY_GAP_WIDTH"] = "0"

        cfg = Config()

        with self.assertRaises(ValueError):
            cfg.validate()

    def test_validate_rejects_missing_icons_file(self) -> None:
        os.environ["POKERDISPLAY_ICONS_PATH"] = "/nonexistent/icons.json"

        cfg = Config()

        with self.assertRaises(ValueError):
            cfg.validate()

    def test_icon_tables_loaded_from_file(self) -> None:
        document = {
            "upper": {
                suit.value: {rank: 1 for rank in (
                    "ace", "two", "three", "four", "five", "six", "seven",
                    "eight", "nine", "ten", "jack", "queen", "king",
                )}
                for suit in Suit
            },
            "lower": {suit.value: 2 for suit in Suit},
        }
        document["upper"]["face_down"] = 3
        document["lower"]["face_down"] = 4

        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "icons.json")
            with open(path, "w", encoding="utf-8") as handle:
                json.dump(document, handle)
            os.environ["POKERDISPLAY_ICONS_PATH"] = path
            os.environ["POKERDISPLAY_GAP_WIDTH"] = "1"

            cfg = Config()
            cfg.validate()
            renderer = CardGridRenderer.from_config(cfg)

        self.assertEqual(
            renderer.render([], 1, 2),
            "<:card:3> <:card:3>\n<:card:4> <:card:4>",
        )

    def test_incomplete_icons_file_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = os.path.join(tmp_dir, "icons.json")
            with open(path, "w", encoding="utf-8") as handle:
                json.dump({"upper": {"face_down": 1}, "lower": {"face_down": 2}}, handle)
            os.environ["POKERDISPLAY_ICONS_PATH"] = path

            with self.assertRaises(IconTableError):
                Config().icon_tables()

    def test_message_builder_from_config(self) -> None:
        os.environ["POKERDISPLAY_PLATFORM"] = "telegram"
        os.environ["POKERDISPLAY_COMMUNITY_SLOTS"] = "3"

        builder = MessageBuilder.from_config(Config())
        message = builder.game_state_message([], [])

        self.assertTrue(message.startswith("<b>Community Cards:</b>\n"))
        self.assertEqual(message.split("\n")[1].count("<tg-emoji"), 3)

    def test_renderer_gap_follows_config(self) -> None:
        os.environ["POKERDISPLAY_GAP_WIDTH"] = "5"

        renderer = CardGridRenderer.from_config(Config())

        self.assertEqual(renderer.gap, " " * 5)


if __name__ == "__main__":
    unittest.main()

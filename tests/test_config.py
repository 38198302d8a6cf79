import logging
import os
from pathlib import Path

import pytest

from piledeck import Card, Deck, env_loader, rand
from piledeck.config import DeckConfig
from piledeck.env_loader import load_env_file, parse_env_line
from piledeck.logging_setup import configure_logging


@pytest.fixture
def clean_env(monkeypatch) -> dict:
    environ = {}
    monkeypatch.setattr(os, "environ", environ)
    return environ


def test_defaults(clean_env: dict) -> None:
    config = DeckConfig.from_env()
    assert config.shuffle_seed is None
    assert config.log_level == "WARNING"
    assert config.trace is False
    assert config.trace_level == logging.DEBUG


def test_values_from_environment(clean_env: dict) -> None:
    clean_env.update(
        {"DECK_SHUFFLE_SEED": "42", "DECK_LOG_LEVEL": "debug", "DECK_TRACE": "yes"}
    )

    config = DeckConfig.from_env()

    assert config.shuffle_seed == 42
    assert config.log_level == "DEBUG"
    assert config.trace is True
    assert config.trace_level == logging.INFO


def test_invalid_seed_is_ignored(clean_env: dict) -> None:
    clean_env["DECK_SHUFFLE_SEED"] = "not-a-number"
    assert DeckConfig.from_env().shuffle_seed is None


@pytest.mark.parametrize(
    "line, expected",
    [
        ("KEY=value", ("KEY", "value")),
        ("export KEY = 'quoted value'", ("KEY", "quoted value")),
        ('KEY="x=y"', ("KEY", "x=y")),
        ("# comment", None),
        ("", None),
        ("NOEQUALS", None),
        ("=value", None),
    ],
)
def test_parse_env_line(line: str, expected: object) -> None:
    assert parse_env_line(line) == expected


def test_load_env_file_does_not_override(tmp_path: Path, clean_env: dict) -> None:
    env_file = tmp_path / "deck.env"
    env_file.write_text("DECK_SHUFFLE_SEED=7\nDECK_LOG_LEVEL=INFO\n", encoding="utf-8")
    clean_env["PILEDECK_ENV_FILE"] = str(env_file)
    clean_env["DECK_LOG_LEVEL"] = "ERROR"

    load_env_file(force=True)

    assert clean_env["DECK_SHUFFLE_SEED"] == "7"
    assert clean_env["DECK_LOG_LEVEL"] == "ERROR"


def test_configure_logging_sets_package_level(clean_env: dict) -> None:
    configure_logging("info")
    assert logging.getLogger("piledeck").level == logging.INFO

    configure_logging("nonsense")
    assert logging.getLogger("piledeck").level == logging.WARNING


def test_trace_logs_deck_operations_at_info(clean_env: dict, caplog) -> None:
    clean_env["DECK_TRACE"] = "1"
    deck = Deck()

    with caplog.at_level(logging.INFO, logger="piledeck.deck"):
        deck.shuffle_remaining()

    assert "shuffled 0 remaining cards" in caplog.text


def test_deck_does_not_read_env_file(tmp_path: Path, clean_env: dict, monkeypatch) -> None:
    env_file = tmp_path / "deck.env"
    env_file.write_text("DECK_LEAKED=yes\nDECK_SHUFFLE_SEED=5\n", encoding="utf-8")
    clean_env["PILEDECK_ENV_FILE"] = str(env_file)
    monkeypatch.setattr(env_loader, "_LOADED", False)
    monkeypatch.setattr(rand, "_RNG", None)
    before = dict(clean_env)

    deck = Deck([Card("As"), Card("Kd")])
    deck.shuffle_remaining()
    deck.draw(1)

    assert clean_env == before
    assert env_loader._LOADED is False


def test_configure_logging_loads_env_file(tmp_path: Path, clean_env: dict, monkeypatch) -> None:
    env_file = tmp_path / "deck.env"
    env_file.write_text("DECK_LOG_LEVEL=ERROR\n", encoding="utf-8")
    clean_env["PILEDECK_ENV_FILE"] = str(env_file)
    monkeypatch.setattr(env_loader, "_LOADED", False)

    configure_logging()

    assert clean_env["DECK_LOG_LEVEL"] == "ERROR"
    assert logging.getLogger("piledeck").level == logging.ERROR

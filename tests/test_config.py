"""
Tests for environment-driven configuration
"""

import pytest

from protege.config import ProtegeConfig, get_config, reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = ProtegeConfig()

    assert config.vowelless_max_length == 8
    assert config.min_vowel_ratio == 0.15
    assert config.max_vowel_ratio == 0.75
    assert config.long_segment_length == 15
    assert config.max_word_length == 20
    assert config.task_target_prefix == "task-"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PROTEGE_CONSONANT_RUN_LENGTH", "7")
    monkeypatch.setenv("PROTEGE_MIN_VOWEL_RATIO", "0.2")
    monkeypatch.setenv("PROTEGE_TASK_TARGET_PREFIX", "todo-")

    config = ProtegeConfig.from_env()

    assert config.consonant_run_length == 7
    assert config.min_vowel_ratio == 0.2
    assert config.task_target_prefix == "todo-"


def test_blank_override_keeps_default(monkeypatch):
    monkeypatch.setenv("PROTEGE_MAX_WORD_LENGTH", "  ")

    assert ProtegeConfig.from_env().max_word_length == 20


def test_invalid_override_raises(monkeypatch):
    monkeypatch.setenv("PROTEGE_MIN_VOWEL_RATIO", "lots")

    with pytest.raises(ValueError):
        ProtegeConfig.from_env()


def test_default_config_is_cached_until_reset(monkeypatch):
    first = get_config()
    assert get_config() is first

    monkeypatch.setenv("PROTEGE_CONTEXT_MIN_VOWELS", "3")
    assert get_config().context_min_vowels == 2

    reset_config()
    assert get_config().context_min_vowels == 3

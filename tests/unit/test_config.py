"""
Unit tests for Settings and the immutable ServiceConfig.
"""

import pytest
from pydantic import ValidationError

from sentiment_layer.config import PLACEHOLDER_TOKEN, ServiceConfig, Settings


def make_config(**overrides) -> ServiceConfig:
    values = {
        "api_token": "hf_real",
        "primary_url": "https://models.test/primary",
        "secondary_url": "https://models.test/secondary",
    }
    values.update(overrides)
    return ServiceConfig(**values)


@pytest.mark.parametrize(
    "token,expected",
    [
        ("hf_real", True),
        (None, False),
        ("", False),
        ("   ", False),
        (PLACEHOLDER_TOKEN, False),
    ],
)
def test_has_credential(token, expected):
    assert make_config(api_token=token).has_credential is expected


def test_with_credential_returns_new_instance():
    original = make_config()
    updated = original.with_credential("hf_other")

    assert updated is not original
    assert updated.api_token == "hf_other"
    assert original.api_token == "hf_real"
    assert updated.primary_url == original.primary_url


def test_with_ensemble_returns_new_instance():
    original = make_config()
    updated = original.with_ensemble(False)

    assert original.ensemble_enabled is True
    assert updated.ensemble_enabled is False


def test_frozen():
    config = make_config()
    with pytest.raises(ValidationError):
        config.ensemble_enabled = False


def test_defaults():
    config = make_config()

    assert config.timeout == 15.0
    assert config.primary_weight == 0.7
    assert config.secondary_weight == 0.3
    assert config.batch_size == 3
    assert config.batch_pause_seconds == 2.0
    assert config.keyword_limit == 6


@pytest.mark.parametrize("field,value", [("batch_size", 0), ("timeout", 0), ("keyword_limit", 0)])
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        make_config(**{field: value})


def test_from_settings(monkeypatch):
    monkeypatch.setenv("HF_API_TOKEN", "hf_from_env")
    monkeypatch.setenv("ENSEMBLE_ENABLED", "false")
    monkeypatch.setenv("BATCH_SIZE", "5")

    config = ServiceConfig.from_settings(Settings(_env_file=None))

    assert config.api_token == "hf_from_env"
    assert config.has_credential
    assert config.ensemble_enabled is False
    assert config.batch_size == 5
    assert "cardiffnlp" in config.primary_url
    assert "nlptown" in config.secondary_url

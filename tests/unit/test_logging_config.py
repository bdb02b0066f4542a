"""
Unit tests for structured logging processors.
"""

from sentiment_layer.logging_config import add_app_context, mask_credentials


def test_mask_credentials_hides_tokens():
    event = mask_credentials(
        None,
        "info",
        {"event": "Credential updated", "token": "hf_secret_value", "api_token": "hf_other"},
    )

    assert event["token"] == "hf_***"
    assert event["api_token"] == "hf_***"
    assert event["event"] == "Credential updated"


def test_mask_credentials_leaves_other_values():
    event = mask_credentials(None, "info", {"event": "x", "token": None, "remote_enabled": True})

    assert event["token"] is None
    assert event["remote_enabled"] is True


def test_add_app_context():
    assert add_app_context(None, "info", {"event": "x"})["app"] == "sentiment-layer"

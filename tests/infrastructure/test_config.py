"""Settings tests - defaults and cross-field validation."""

import pytest
from pydantic import ValidationError

from wallboard.config import Settings


def test_settings_defaults():
    settings = Settings(_env_file=None)
    assert settings.cache_ttl_seconds == 300
    assert settings.refresh_debounce_ms == 300
    assert settings.fetch_timeout_seconds == 10.0


def test_settings_reject_inverted_latency_range():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, mock_latency_min_seconds=2, mock_latency_max_seconds=1)


def test_settings_reject_non_positive_timeout():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, fetch_timeout_seconds=0)

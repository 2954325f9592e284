"""
Unit Tests for Lipa na M-Pesa password derivation
"""

import base64
from datetime import date, datetime

import pytest

from mpesa_connector.utils.credentials import (
    compact_datetime_timestamp,
    epoch_day_timestamp,
    generate_password,
    get_timestamp_provider,
)

SANDBOX_PASSKEY = "bfb279f9aa9bdbcf158e97dd71a467cd2e0c893059b10f78e6b72ada1ed2c919"


class TestGeneratePassword:

    def test_known_sandbox_vector(self):
        expected = base64.b64encode(
            ("174379" + SANDBOX_PASSKEY + "20070").encode("utf-8")
        ).decode("utf-8")

        assert generate_password(174379, SANDBOX_PASSKEY, 20070) == expected

    def test_deterministic(self):
        first = generate_password(174379, SANDBOX_PASSKEY, 20070)
        second = generate_password(174379, SANDBOX_PASSKEY, 20070)
        assert first == second

    @pytest.mark.parametrize("shortcode, passkey, timestamp", [
        (0, "", 0),
        (174379, SANDBOX_PASSKEY, 20070),
        (600000, "p@ss key/with+chars", 20240101120000),
        (1, "ключ", 19999),
    ])
    def test_decodes_to_plain_concatenation(self, shortcode, passkey, timestamp):
        password = generate_password(shortcode, passkey, timestamp)
        decoded = base64.b64decode(password).decode("utf-8")
        assert decoded == f"{shortcode}{passkey}{timestamp}"

    def test_changes_with_timestamp(self):
        assert generate_password(174379, "key", 20070) != generate_password(174379, "key", 20071)


class TestTimestampProviders:

    def test_epoch_day(self):
        assert epoch_day_timestamp(date(1970, 1, 1)) == 0
        assert epoch_day_timestamp(date(2024, 12, 13)) == 20070

    def test_epoch_day_defaults_to_today(self):
        assert epoch_day_timestamp() == (date.today() - date(1970, 1, 1)).days

    def test_compact_datetime(self):
        assert compact_datetime_timestamp(datetime(2024, 12, 13, 9, 5, 7)) == 20241213090507

    def test_resolve_by_name(self):
        assert get_timestamp_provider("epoch_day") is epoch_day_timestamp
        assert get_timestamp_provider("DATETIME") is compact_datetime_timestamp

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unknown timestamp format"):
            get_timestamp_provider("unix_seconds")

"""Tests for expiry status and severity value objects."""

from __future__ import annotations

import pytest

from fleetdesk.domain.value_objects import (
    SEVERITY_BY_STATUS,
    ExpiryLabels,
    ExpiryStatusKind,
    SeverityToken,
)


class TestExpiryStatusKind:
    """Tests for ExpiryStatusKind enum."""

    def test_safe_does_not_require_attention(self) -> None:
        assert ExpiryStatusKind.SAFE.requires_attention is False

    @pytest.mark.parametrize(
        "status",
        [
            ExpiryStatusKind.UNKNOWN,
            ExpiryStatusKind.EXPIRED,
            ExpiryStatusKind.CRITICAL,
            ExpiryStatusKind.WARNING,
        ],
    )
    def test_other_statuses_require_attention(self, status: ExpiryStatusKind) -> None:
        """Anything not safe counts as a warning, unknown included."""
        assert status.requires_attention is True

    def test_status_values(self) -> None:
        """Status enum values should be lowercase strings."""
        assert [s.value for s in ExpiryStatusKind] == [
            "unknown",
            "expired",
            "critical",
            "warning",
            "safe",
        ]
        assert str(ExpiryStatusKind.CRITICAL) == "critical"


class TestSeverityTable:
    """Status-to-token lookup is independent of classification."""

    def test_table_covers_every_status(self) -> None:
        assert set(SEVERITY_BY_STATUS) == set(ExpiryStatusKind)

    def test_expired_and_critical_share_danger(self) -> None:
        assert ExpiryStatusKind.EXPIRED.severity == SeverityToken.DANGER
        assert ExpiryStatusKind.CRITICAL.severity == SeverityToken.DANGER

    def test_remaining_tokens(self) -> None:
        assert ExpiryStatusKind.UNKNOWN.severity == SeverityToken.NEUTRAL
        assert ExpiryStatusKind.WARNING.severity == SeverityToken.CAUTION
        assert ExpiryStatusKind.SAFE.severity == SeverityToken.OK

    def test_css_classes(self) -> None:
        assert SeverityToken.NEUTRAL.css_class == "bg-gray-100 text-gray-800"
        assert SeverityToken.DANGER.css_class == "bg-red-100 text-red-800"
        assert SeverityToken.CAUTION.css_class == "bg-yellow-100 text-yellow-800"
        assert SeverityToken.OK.css_class == "bg-green-100 text-green-800"


class TestExpiryLabels:
    """Tests for label catalogs."""

    def test_remaining_formats_days(self) -> None:
        assert ExpiryLabels.english().remaining(3) == "3 days remaining"

    @pytest.mark.parametrize("code", ["vi", "vi-VN", "VI"])
    def test_vietnamese_locale_codes(self, code: str) -> None:
        assert ExpiryLabels.for_locale(code) == ExpiryLabels.vietnamese()

    def test_english_locale(self) -> None:
        assert ExpiryLabels.for_locale("en-US") == ExpiryLabels.english()

    def test_unknown_locale_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unsupported label locale"):
            ExpiryLabels.for_locale("fr")

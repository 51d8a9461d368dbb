"""Domain service classifying document dates into expiry statuses."""

from __future__ import annotations

from datetime import date, datetime

from ..value_objects import (
    ExpiryLabels,
    ExpiryStatus,
    ExpiryStatusKind,
    ExpiryThresholds,
)

DateInput = date | datetime | str | None


class ExpiryClassifier:
    """
    Classify a document date relative to an injected ``now``.

    ``classify`` is total: missing or unparsable input resolves to an
    ``unknown`` status instead of raising, so every record can be rendered.
    """

    def __init__(
        self,
        thresholds: ExpiryThresholds | None = None,
        labels: ExpiryLabels | None = None,
    ) -> None:
        """Initialize classifier with thresholds and a label catalog."""
        self._thresholds = thresholds or ExpiryThresholds()
        self._labels = labels or ExpiryLabels.english()

    @property
    def thresholds(self) -> ExpiryThresholds:
        return self._thresholds

    def classify(self, date_input: DateInput, now: date | datetime) -> ExpiryStatus:
        """
        Classify a single date.

        Args:
            date_input: The document date, in any supported form, or None.
            now: Evaluation time; only its calendar date is used.

        Returns:
            ExpiryStatus with status, colour token and label.
        """
        if _is_missing(date_input):
            return self._unknown(self._labels.not_recorded)

        parsed = self.parse_date(date_input)
        if parsed is None:
            return self._unknown(self._labels.invalid_date)

        days_left = (parsed - _as_date(now)).days
        status = self.status_for_days(days_left)
        label = (
            self._labels.expired
            if status is ExpiryStatusKind.EXPIRED
            else self._labels.remaining(days_left)
        )
        return ExpiryStatus(
            status=status,
            color_class=status.severity,
            label=label,
            days_left=days_left,
        )

    def status_for_days(self, days_left: int) -> ExpiryStatusKind:
        """Bucket a whole-day count; first matching rule wins."""
        if days_left < 0:
            return ExpiryStatusKind.EXPIRED
        if days_left <= self._thresholds.critical:
            return ExpiryStatusKind.CRITICAL
        if days_left <= self._thresholds.warning:
            return ExpiryStatusKind.WARNING
        return ExpiryStatusKind.SAFE

    @staticmethod
    def parse_date(value: DateInput) -> date | None:
        """Parse a date-like value into a calendar date, or None if absent or invalid."""
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if not isinstance(value, str) or not value.strip():
            return None

        text = value.strip()
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            return None

    def _unknown(self, label: str) -> ExpiryStatus:
        status = ExpiryStatusKind.UNKNOWN
        return ExpiryStatus(status=status, color_class=status.severity, label=label)


def _is_missing(value: DateInput) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value

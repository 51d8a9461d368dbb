"""Localized label catalogs for expiry statuses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ExpiryLabels:
    """Human-readable strings rendered next to an expiry status."""

    not_recorded: str
    invalid_date: str
    expired: str
    days_remaining: str

    def remaining(self, days: int) -> str:
        """Format the remaining-days label."""
        return self.days_remaining.format(days=days)

    @classmethod
    def english(cls) -> ExpiryLabels:
        return cls(
            not_recorded="Not yet recorded",
            invalid_date="Invalid date",
            expired="Already expired",
            days_remaining="{days} days remaining",
        )

    @classmethod
    def vietnamese(cls) -> ExpiryLabels:
        return cls(
            not_recorded="Chưa cập nhật",
            invalid_date="Ngày không hợp lệ",
            expired="Đã hết hạn",
            days_remaining="Còn {days} ngày",
        )

    @classmethod
    def for_locale(cls, code: str) -> ExpiryLabels:
        """Get the catalog for a locale code such as ``en`` or ``vi-VN``."""
        match code.split("-")[0].lower():
            case "en":
                return cls.english()
            case "vi":
                return cls.vietnamese()
            case _:
                msg = f"Unsupported label locale: {code!r} (use 'en' or 'vi')"
                raise ValueError(msg)

"""Trip code value object."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import ClassVar

from ..exceptions import InvalidTripCodeError

TRIP_CODE_ALPHABET = string.digits + string.ascii_uppercase
TRIP_CODE_SUFFIX_LENGTH = 5


@dataclass(frozen=True, slots=True)
class TripCode:
    """Human-readable trip identifier shaped ``PREFIX-YYYYMM-XXXXX``.

    Codes are labels, not keys: 36**5 suffixes per prefix and month leave
    collision handling to the trip store.
    """

    prefix: str
    period: str
    suffix: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^(?P<prefix>[A-Z0-9]+)-(?P<period>\d{4}(0[1-9]|1[0-2]))-(?P<suffix>[A-Z0-9]{5})$"
    )

    def __str__(self) -> str:
        return f"{self.prefix}-{self.period}-{self.suffix}"

    @property
    def year(self) -> int:
        return int(self.period[:4])

    @property
    def month(self) -> int:
        return int(self.period[4:])

    @staticmethod
    def combinations() -> int:
        """Number of distinct suffixes available in one period."""
        return len(TRIP_CODE_ALPHABET) ** TRIP_CODE_SUFFIX_LENGTH

    @classmethod
    def parse(cls, text: str) -> TripCode:
        """Parse a rendered trip code."""
        match = cls.PATTERN.match(text.strip())
        if match is None:
            msg = f"Invalid trip code: {text!r}"
            raise InvalidTripCodeError(msg)
        return cls(
            prefix=match["prefix"],
            period=match["period"],
            suffix=match["suffix"],
        )

"""Domain service generating human-readable trip codes."""

from __future__ import annotations

import random
from collections.abc import Callable
from datetime import date

from ..value_objects import TRIP_CODE_ALPHABET, TRIP_CODE_SUFFIX_LENGTH, TripCode

SuffixSource = Callable[[int], str]

DEFAULT_PREFIX = "CH"


def random_suffix_source(rng: random.Random | None = None) -> SuffixSource:
    """Build a suffix source drawing from the base-36 alphabet.

    Not cryptographic: trip codes are labels, not tokens.
    """
    generator = rng or random.Random()

    def draw(length: int) -> str:
        return "".join(generator.choices(TRIP_CODE_ALPHABET, k=length))

    return draw


class TripCodeGenerator:
    """Generate ``PREFIX-YYYYMM-XXXXX`` codes for new trips."""

    def __init__(
        self,
        prefix: str = DEFAULT_PREFIX,
        *,
        suffix_source: SuffixSource | None = None,
    ) -> None:
        """Initialize generator with a fixed prefix and a suffix source."""
        prefix = prefix.strip().upper()
        if not prefix or not prefix.isalnum() or not prefix.isascii():
            msg = f"Trip code prefix must be non-empty ASCII alphanumeric, got {prefix!r}"
            raise ValueError(msg)
        self._prefix = prefix
        self._suffix_source = suffix_source or random_suffix_source()

    @property
    def prefix(self) -> str:
        return self._prefix

    def generate(self, now: date) -> TripCode:
        """Generate a code bucketed by the year and month of ``now``."""
        suffix = self._suffix_source(TRIP_CODE_SUFFIX_LENGTH).upper()
        return TripCode(
            prefix=self._prefix,
            period=f"{now.year:04d}{now.month:02d}",
            suffix=suffix,
        )

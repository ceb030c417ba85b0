"""
Input Normalizer
----------------
Turns the raw ``n`` text taken from the request into a ComputationIndex:

  absent / malformed  → default index
  v > max_index       → max_index
  otherwise           → v

The normalizer never raises for a request value. It does not trim
whitespace; callers that want trimming must do it before calling.
"""

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

# Optional "+" then ASCII digits only: int() alone would also accept " 5",
# "1_0" and non-ASCII digits.
_DIGITS = re.compile(r"\+?([0-9]+)")


class IndexNormalizer:
    """Maps raw request text to an index in ``[0, max_index]``."""

    def __init__(self, default_index: int = 10, max_index: int = 100):
        if default_index < 0:
            raise ValueError(f"default_index must be >= 0, got {default_index}")
        if max_index < 0:
            raise ValueError(f"max_index must be >= 0, got {max_index}")
        if default_index > max_index:
            raise ValueError(
                f"default_index ({default_index}) exceeds max_index ({max_index})"
            )
        self.default_index = default_index
        self.max_index = max_index
        self._max_digits = len(str(max_index))

    def normalize(self, raw: Optional[str]) -> int:
        if raw is None:
            logger.debug(f"No index supplied, using default: {self.default_index}")
            return self.default_index

        match = _DIGITS.fullmatch(raw)
        if match is None:
            logger.debug(f"Unparseable index {raw!r}, using default: {self.default_index}")
            return self.default_index

        digits = match.group(1).lstrip("0") or "0"
        # More digits than max_index has means larger than max_index; clamp
        # without converting, so arbitrarily long input costs nothing.
        if len(digits) > self._max_digits:
            logger.debug(f"Index of {len(digits)} digits clamped to {self.max_index}")
            return self.max_index

        value = int(digits)
        if value > self.max_index:
            logger.debug(f"Index {value} clamped to {self.max_index}")
            return self.max_index
        return value

    def __repr__(self):
        return f"<IndexNormalizer default={self.default_index} max={self.max_index}>"


def normalize_index(raw: Optional[str], default_index: int = 10, max_index: int = 100) -> int:
    """One-shot helper around :class:`IndexNormalizer`."""
    return IndexNormalizer(default_index=default_index, max_index=max_index).normalize(raw)

"""Numeric token extraction from noisy Horizons report fields.

Horizons values carry trailing units, uncertainty suffixes and footnote
glyphs (``2439.4+-0.1``, ``58.6463 d``, ``3.70*``). The extractor reads the
longest leading run that can form a float literal and ignores the rest.
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger("orrery.parser")

_DIGITS = frozenset("0123456789")
_EXPONENT_MARKERS = frozenset("eE")
_SIGNS = frozenset("+-")


def extract_number(text: str) -> float | None:
    """Extract the leading float literal of ``text``.

    Accepted shape: optional leading ``-``, digits with at most one decimal
    point, then optionally ``e``/``E`` followed by an optionally signed
    exponent. Scanning stops at the first character that cannot extend the
    literal.

    Returns None if no digit was read, if the run holds more than one
    decimal point (``1234.1.2``), or if the result is not a finite float.
    """
    token: list[str] = []
    seen_digit = False
    seen_point = False
    in_exponent = False

    for index, char in enumerate(text):
        if char in _DIGITS:
            seen_digit = True
        elif char == "-" and index == 0:
            pass
        elif char == ".":
            if seen_point or in_exponent:
                logger.debug("Malformed numeric token %r", text)
                return None
            seen_point = True
        elif char in _EXPONENT_MARKERS and seen_digit and not in_exponent:
            in_exponent = True
        elif char in _SIGNS and in_exponent and token[-1] in _EXPONENT_MARKERS:
            pass
        else:
            break
        token.append(char)

    if not seen_digit:
        return None

    try:
        value = float("".join(token))
    except ValueError:
        logger.debug("Unparsable numeric token %r", "".join(token))
        return None

    if not math.isfinite(value):
        return None
    return value

"""Funding figure extraction from free-form funding text.

Stored funding data looks like ``["$1.5 billion Series C"]``,
``raised 250m`` or just ``1500``. ``parse_funding`` reduces it to a single
canonical token such as ``$1.5B``, ``$250M`` or ``$500K``.
"""

import re

_NUMBER = r"(\d+(?:\.\d+)?)"

# Tried in this order; every match of every family is collected and the
# first collected token wins, so earlier families take precedence.
FUNDING_PATTERNS = [
    re.compile(rf"\$?{_NUMBER}\s*(billion|b\b)"),
    re.compile(rf"\$?{_NUMBER}\s*(million|m\b)"),
    re.compile(rf"{_NUMBER}\s*([bm])\b"),
    re.compile(rf"{_NUMBER}\s*(billion|million)"),
]

_BARE_NUMBER_RE = re.compile(rf"\$?{_NUMBER}")


def _format_amount(value: float) -> str:
    """Render like a JS number: ``1.50`` -> ``1.5``, ``250.0`` -> ``250``."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _token(value: float, suffix: str) -> str:
    return f"${_format_amount(value)}{suffix}"


def _unit_suffix(unit: str) -> str | None:
    if unit.startswith("b"):
        return "B"
    if unit.startswith("m"):
        return "M"
    return None


def _structured_matches(text: str) -> list[str]:
    tokens = []
    for pattern in FUNDING_PATTERNS:
        for match in pattern.finditer(text):
            suffix = _unit_suffix(match.group(2))
            if suffix:
                tokens.append(_token(float(match.group(1)), suffix))
    return tokens


def _guess_from_bare_number(text: str) -> str | None:
    """Label the first number using whatever unit hints the text carries."""
    match = _BARE_NUMBER_RE.search(text)
    if not match:
        return None

    value = float(match.group(1))
    if "billion" in text or "b" in text:
        return _token(value, "B")
    if "million" in text or "m" in text:
        return _token(value, "M")
    # Large unitless figures are assumed to be millions
    if value > 1000:
        return _token(value, "M")
    return _token(value, "K")


def parse_funding(raw: str | list[str] | None) -> str | None:
    """Extract a canonical ``$<amount><K|M|B>`` token, or None if there is none."""
    if raw is None:
        return None

    if isinstance(raw, list):
        text = " ".join(str(part) for part in raw)
    else:
        text = str(raw)
    text = text.strip().lower()
    if not text:
        return None

    tokens = _structured_matches(text)
    if tokens:
        return tokens[0]
    return _guess_from_bare_number(text)

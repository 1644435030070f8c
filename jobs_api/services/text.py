"""Display text cleanup for loosely encoded stored strings.

Stored fields are sometimes flattened JSON objects (``{"region": "EU"}``),
sometimes plain text. ``normalize`` turns either into something safe to show
on a card without trying to be a JSON parser.
"""

import logging
import re

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"

_JSON_ARTIFACTS_RE = re.compile(r"[{}\"'\\]")
_QUOTES_RE = re.compile(r"[{}\"']")
_COLON_SPACING_RE = re.compile(r":\s*")
_COMMA_SPACING_RE = re.compile(r",\s*")

# Values that mean "nothing here" once quotes are gone
_EMPTY_VALUES = {"", "null", "undefined"}


def _respace(cleaned: str) -> str:
    cleaned = _COLON_SPACING_RE.sub(": ", cleaned)
    cleaned = _COMMA_SPACING_RE.sub(", ", cleaned)
    return cleaned.strip()


def _extract_values(cleaned: str) -> list[str]:
    """Keep only the value half of each ``key: value`` segment."""
    values = []
    for segment in cleaned.split(","):
        segment = segment.strip()
        key, sep, value = segment.partition(":")
        value = value.strip() if sep else segment
        if value not in _EMPTY_VALUES:
            values.append(value)
    return values


def normalize(raw: str | None) -> str:
    """Clean a stored string for display.

    Returns ``"N/A"`` for empty input or when nothing survives cleaning.
    Never raises.
    """
    if not raw:
        return NOT_AVAILABLE

    try:
        cleaned = _JSON_ARTIFACTS_RE.sub("", raw).strip()
        # Only flattened key: value text is re-spaced; plain text is left alone
        if ":" in cleaned:
            cleaned = _respace(cleaned)
            values = _extract_values(cleaned)
            if values:
                return ", ".join(values)
        return cleaned or NOT_AVAILABLE
    except Exception as e:
        logger.warning("Falling back to quote stripping for %r: %s", raw, e)
        return _QUOTES_RE.sub("", str(raw)).strip() or NOT_AVAILABLE


"""RFC 2833 telephone event codes for DTMF digits."""

from __future__ import annotations

_EVENT_CHARS = "0123456789*#ABCD!"
_CHAR_EVENTS = {ch: n for n, ch in enumerate(_EVENT_CHARS)}
_CHAR_EVENTS.update({ch.lower(): n for ch, n in _CHAR_EVENTS.items() if ch.isalpha()})


def dtmf_to_char(event: int) -> str:
    """Turn a telephone event number into its DTMF character."""
    if not 0 <= event < len(_EVENT_CHARS):
        raise ValueError(f"bad tel event: {event}")
    return _EVENT_CHARS[event]


def char_to_dtmf(ch: str) -> int:
    """Turn a DTMF character into its telephone event number."""
    try:
        return _CHAR_EVENTS[ch]
    except KeyError:
        raise ValueError(f"bad dtmf char:{ch}") from None
"""Value system for the simulator.

Provides value-token parsing, register-name recognition, and the display
helpers built on them.  Everything here is total: no input raises.
"""

from __future__ import annotations

import json
import re

from regnote.model.notebook import RegisterValue


# ---------------------------------------------------------------------------
# Register names
# ---------------------------------------------------------------------------

_REGISTER_RE = re.compile(r"[vp][0-9]+")
_MENTION_RE = re.compile(r"(\b[vp][0-9]+\b)", re.ASCII)
_INTEGER_RE = re.compile(r"[0-9]+")


def is_register(text: object) -> bool:
    """True if *text* names a register (``v`` or ``p`` plus digits)."""
    return _REGISTER_RE.fullmatch(str(text or "").strip()) is not None


def split_register_mentions(text: str) -> list[tuple[str, bool]]:
    """Split free text into ``(segment, is_register)`` pairs.

    Register mentions must stand on word boundaries, so ``v0`` in
    ``"move v0, p1"`` is a mention but the ``v1`` inside ``"xv1"`` is not.
    Empty segments are dropped; joining the segments gives back *text*.
    """
    if not text:
        return []
    return [
        (part, is_register(part))
        for part in _MENTION_RE.split(text)
        if part
    ]


def register_sort_key(name: str) -> tuple[int, int, str]:
    """Parameters first, then locals, each by numeric suffix.

    Names that are not registers sort after every register.
    """
    if not is_register(name):
        return (2, 0, name)
    name = name.strip()
    return (0 if name[0] == "p" else 1, int(name[1:]), name)


def sorted_registers(names) -> list[str]:
    return sorted(names, key=register_sort_key)


# ---------------------------------------------------------------------------
# Value tokens
# ---------------------------------------------------------------------------

def parse_value_token(token: object) -> RegisterValue:
    """Parse the right-hand side of an assignment into a value.

    - empty / missing -> None
    - "null" -> None
    - "true"/"false" -> bool
    - unsigned decimal digits -> int
    - text wrapped in matching single or double quotes -> inner text
    - anything else -> the trimmed text itself
    """
    if not isinstance(token, str):
        return None
    text = token.strip()
    if not text or text == "null":
        return None
    if text == "true":
        return True
    if text == "false":
        return False
    if _INTEGER_RE.fullmatch(text):
        return int(text)
    # No escape processing; a lone quote character yields "".
    if (text.startswith('"') and text.endswith('"')) or (
        text.startswith("'") and text.endswith("'")
    ):
        return text[1:-1]
    return text


def format_value(value: RegisterValue) -> str:
    """Render a value the way the inspector shows it (JSON literal)."""
    return json.dumps(value, ensure_ascii=False)

"""Statement splitting and evaluation.

A script is a flat list of ``<register> = <value>`` statements separated
by semicolons or newlines.  Anything else in a script is scratch text and
is skipped without error.
"""

from __future__ import annotations

import re

from regnote.model.notebook import RegisterValue

from ._values import parse_value_token

_SEPARATOR_RE = re.compile(r"[;\n]+")
_STATEMENT_RE = re.compile(r"([vp][0-9]+)\s*=\s*(.+)")


def split_statements(script: str | None) -> list[str]:
    """Split a script into trimmed, non-empty statements."""
    text = (script or "").strip()
    if not text:
        return []
    return [s.strip() for s in _SEPARATOR_RE.split(text) if s.strip()]


def apply_statement(statement: str, state: dict[str, RegisterValue]) -> bool:
    """Apply one assignment to *state* in place.

    Returns True when the statement assigned a register.  The right-hand
    side is taken greedily, so ``v0 = a = b`` stores the string ``"a = b"``.
    Registers outside the declared set are created.
    """
    m = _STATEMENT_RE.fullmatch(statement.strip())
    if m is None:
        return False
    register, rhs = m.group(1), m.group(2)
    state[register] = parse_value_token(rhs)
    return True


def execute_script(script: str | None, state: dict[str, RegisterValue]) -> int:
    """Apply every statement of *script* to *state*; return how many assigned."""
    applied = 0
    for stmt in split_statements(script):
        if apply_statement(stmt, state):
            applied += 1
    return applied

"""regnote simulator — replay notebook scripts into per-line register state.

Entry point::

    from regnote.simulate import recompute

    method = recompute(method)
    method.snapshots[3]["v0"]   # value of v0 right after line 3
    method.live_state           # state after the last line
"""

from __future__ import annotations

from ._engine import (
    RegisterKind,
    add_register,
    bootstrap_registers,
    ordered_lines,
    recompute,
    register_at,
    replay,
    snapshot_at,
)
from ._executor import apply_statement, execute_script, split_statements
from ._values import (
    format_value,
    is_register,
    parse_value_token,
    register_sort_key,
    sorted_registers,
    split_register_mentions,
)

__all__ = [
    "RegisterKind",
    "add_register",
    "apply_statement",
    "bootstrap_registers",
    "execute_script",
    "format_value",
    "is_register",
    "ordered_lines",
    "parse_value_token",
    "recompute",
    "register_at",
    "register_sort_key",
    "replay",
    "snapshot_at",
    "sorted_registers",
    "split_register_mentions",
    "split_statements",
]

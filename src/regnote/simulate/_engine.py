"""Snapshot propagation: replay a method's lines into per-line register state.

Every recompute starts from the method's declared register set and
rebuilds ``live_state`` and ``snapshots`` in full.  Nothing is patched
incrementally and previously stored snapshots are ignored.  Each line
gets its own materialized copy of the whole register state.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from enum import Enum

from regnote.model.notebook import Line, Method, RegisterValue

from ._executor import execute_script

logger = logging.getLogger(__name__)


class RegisterKind(str, Enum):
    PARAM = "p"
    LOCAL = "v"


def bootstrap_registers(method: Method) -> dict[str, RegisterValue]:
    """Copy of ``live_state`` with every declared register present.

    Missing registers default to None; existing values are kept.
    """
    state = dict(method.live_state)
    for name in method.declared_registers:
        state.setdefault(name, None)
    return state


def ordered_lines(lines: Iterable[Line]) -> list[Line]:
    """Lines sorted by ``index``; ties keep their stored order."""
    return sorted(lines, key=lambda line: line.index)


def replay(
    lines: Iterable[Line],
    initial_state: dict[str, RegisterValue],
) -> tuple[dict[int, dict[str, RegisterValue]], dict[str, RegisterValue]]:
    """Run every line in index order against one running state.

    Returns ``(snapshots, final_state)``.  *initial_state* is not mutated.
    When two lines share an index the later one owns the snapshot key.
    """
    ordered = ordered_lines(lines)

    if logger.isEnabledFor(logging.DEBUG):
        dupes = sorted(i for i, n in Counter(l.index for l in ordered).items() if n > 1)
        if dupes:
            logger.debug("duplicate line indices %s; later lines win", dupes)

    state = dict(initial_state)
    snapshots: dict[int, dict[str, RegisterValue]] = {}
    for line in ordered:
        execute_script(line.script, state)
        snapshots[line.index] = dict(state)
    return snapshots, state


def recompute(method: Method) -> Method:
    """Return *method* with ``live_state`` and ``snapshots`` rebuilt.

    All other fields, ``lines`` included, pass through unchanged and the
    input record is left untouched.  Never raises.
    """
    snapshots, final_state = replay(method.lines, bootstrap_registers(method))
    logger.debug(
        "recomputed %s: %d lines, %d registers",
        method.name, len(method.lines), len(final_state),
    )
    return method.model_copy(update={
        "live_state": final_state,
        "snapshots": snapshots,
    })


def add_register(method: Method, kind: RegisterKind | str) -> Method:
    """Declare one more parameter (``"p"``) or local (``"v"``) and recompute.

    The new register takes the next suffix and starts as None; existing
    snapshots gain it on the recompute.
    """
    kind = RegisterKind(kind)
    live_state = dict(method.live_state)
    if kind is RegisterKind.LOCAL:
        update = {"locals": method.locals + 1}
        live_state[f"v{method.locals}"] = None
    else:
        update = {"params": method.params + 1}
        live_state[f"p{method.params}"] = None
    update["live_state"] = live_state
    return recompute(method.model_copy(update=update))


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------

def snapshot_at(method: Method, index: int) -> dict[str, RegisterValue]:
    """Register state right after line *index*, or ``{}`` if there is none."""
    return dict(method.snapshots.get(index, {}))


def register_at(method: Method, index: int, register: str) -> RegisterValue:
    """Value of *register* right after line *index* (None if unknown)."""
    return method.snapshots.get(index, {}).get(register.strip())

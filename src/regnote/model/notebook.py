"""Notebook records: lines and the methods that own them.

A ``Method`` carries two kinds of fields.  ``lines``, ``params`` and
``locals`` are authored by the user; ``live_state`` and ``snapshots`` are
derived, rebuilt from scratch by ``regnote.simulate.recompute`` and never
treated as ground truth.
"""

from __future__ import annotations

import secrets
import string
import time

from pydantic import BaseModel, Field

RegisterValue = bool | int | float | str | None
"""A scalar register value.  There are no arrays or objects."""

_UID_ALPHABET = string.digits + string.ascii_lowercase


def new_uid() -> str:
    """Return a short random identifier (7 lowercase alphanumerics)."""
    return "".join(secrets.choice(_UID_ALPHABET) for _ in range(7))


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class Line(BaseModel):
    """One notebook row.

    ``id`` is stable across edits and only used to target a row.
    ``index`` orders the rows and keys their snapshot; it is normally
    unique and increasing but neither is enforced.
    """

    id: str = Field(default_factory=new_uid)
    index: int
    notes: str = ""
    script: str = ""


class Method(BaseModel):
    """A method notebook: ordered lines plus the register state they produce."""

    id: str = Field(default_factory=lambda: f"meth_{new_uid()}")
    name: str
    params: int = Field(default=0, ge=0)
    locals: int = Field(default=0, ge=0)
    live_state: dict[str, RegisterValue] = {}
    snapshots: dict[int, dict[str, RegisterValue]] = {}
    lines: list[Line] = []
    last_saved_at: int = Field(default_factory=now_ms)

    @property
    def declared_registers(self) -> list[str]:
        """``p0..p(params-1)`` followed by ``v0..v(locals-1)``."""
        return [f"p{i}" for i in range(self.params)] + [
            f"v{i}" for i in range(self.locals)
        ]

    def find_line(self, line_id: str) -> Line | None:
        for line in self.lines:
            if line.id == line_id:
                return line
        return None

"""Factories for new classes, methods and lines.

A new method starts with the default register set and a block of empty
lines, and is simulated once so its snapshot table is populated (all
registers None) before anything is written.
"""

from __future__ import annotations

from regnote.config import DEFAULT_SETTINGS, NotebookSettings
from regnote.errors import InvalidNameError
from regnote.model.collection import NotebookClass
from regnote.model.notebook import Line, Method, now_ms
from regnote.simulate import recompute


def create_method(
    name: str | None = None,
    *,
    settings: NotebookSettings | None = None,
) -> Method:
    """Create a simulated method with the default registers and empty lines."""
    settings = settings or DEFAULT_SETTINGS
    if name is None:
        name = settings.default_method_name
    if not name.strip():
        raise InvalidNameError("Method name cannot be empty.")

    live_state = {f"p{i}": None for i in range(settings.default_params)}
    live_state.update({f"v{i}": None for i in range(settings.default_locals)})
    method = Method(
        name=name,
        params=settings.default_params,
        locals=settings.default_locals,
        live_state=live_state,
        lines=[Line(index=i + 1) for i in range(settings.default_line_count)],
    )
    return recompute(method)


def create_class(
    real_name: str,
    friendly_name: str,
    obfuscated_name: str = "",
) -> NotebookClass:
    """Create an empty class record.  Real and friendly names are required."""
    if not real_name.strip() or not friendly_name.strip():
        raise InvalidNameError("Real Name and Friendly Name are required.")
    return NotebookClass(
        real_name=real_name,
        obfuscated_name=obfuscated_name,
        friendly_name=friendly_name,
    )


# ---------------------------------------------------------------------------
# Line editing
# ---------------------------------------------------------------------------

def next_line_index(method: Method) -> int:
    """One past the highest index in use, or 1 for an empty notebook."""
    if not method.lines:
        return 1
    return max(line.index for line in method.lines) + 1


def append_line(method: Method) -> tuple[Method, Line]:
    """Append an empty line after the highest index.

    Returns the recomputed method and the new line (for focusing it).
    """
    line = Line(index=next_line_index(method))
    updated = method.model_copy(update={
        "lines": [*method.lines, line],
        "last_saved_at": now_ms(),
    })
    return recompute(updated), line


def update_line(
    method: Method,
    line_id: str,
    *,
    notes: str | None = None,
    script: str | None = None,
) -> Method:
    """Patch the notes and/or script of one line and recompute.

    Raises ``KeyError`` if no line has *line_id*.
    """
    if method.find_line(line_id) is None:
        raise KeyError(f"no line with id {line_id!r} in method {method.name!r}")

    patch: dict[str, str] = {}
    if notes is not None:
        patch["notes"] = notes
    if script is not None:
        patch["script"] = script

    lines = [
        line.model_copy(update=patch) if line.id == line_id else line
        for line in method.lines
    ]
    updated = method.model_copy(update={"lines": lines, "last_saved_at": now_ms()})
    return recompute(updated)

"""Shared test helpers for the regnote test suite."""

from regnote.model.notebook import Line, Method


def make_method(scripts=None, *, params=1, locals=1, live_state=None, name="TestMethod"):
    """Build an unsimulated method with one line per script, indexed from 1."""
    lines = [
        Line(id=f"l{i}", index=i + 1, script=script)
        for i, script in enumerate(scripts or [])
    ]
    return Method(
        name=name,
        params=params,
        locals=locals,
        live_state=live_state or {},
        lines=lines,
    )


def line(index, script="", notes="", id=None):
    """Shorthand for a Line with a predictable id."""
    return Line(id=id or f"l{index}", index=index, script=script, notes=notes)

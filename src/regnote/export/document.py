"""JSON export/import of a single method notebook.

The exported document is the full method record.  Import checks the
document's shape, validates it into a ``Method`` and re-runs the
simulation, so stored ``snapshots``/``live_state`` in the file are never
trusted as-is.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from regnote.errors import InvalidNotebookError
from regnote.model.notebook import Method
from regnote.simulate import recompute

logger = logging.getLogger(__name__)


def export_method(method: Method) -> str:
    """Serialize *method* to an indented JSON document."""
    return method.model_dump_json(indent=2)


def export_filename(method: Method) -> str:
    return f"{method.name}-notebook.json"


def import_method(text: str | bytes, *, keep_id: str | None = None) -> Method:
    """Parse a notebook document into a recomputed ``Method``.

    *keep_id* replaces the document's id, so an imported notebook can
    take the place of an existing one.

    Raises ``InvalidNotebookError`` for malformed JSON, for documents
    without a ``lines`` list and non-empty ``name``, and for documents
    that fail model validation.
    """
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise InvalidNotebookError("Invalid JSON file.") from exc

    if not _looks_like_method(data):
        raise InvalidNotebookError("Invalid method notebook file.")

    if keep_id is not None:
        data = {**data, "id": keep_id}

    try:
        method = Method.model_validate(data)
    except ValidationError as exc:
        logger.debug("rejected notebook %r: %s", data.get("name"), exc)
        raise InvalidNotebookError("Invalid method notebook file.") from exc

    return recompute(method)


def _looks_like_method(data: object) -> bool:
    if not isinstance(data, dict):
        return False
    name = data.get("name")
    return isinstance(data.get("lines"), list) and isinstance(name, str) and bool(name)

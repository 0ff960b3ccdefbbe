"""Defaults for new notebooks and the local store."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

DATA_KEY = "app_data"


class NotebookSettings(BaseModel):
    """Tunable defaults.

    Parameters
    ----------
    default_method_name
        Name given to a method created without one.
    default_params, default_locals
        Register counts of a freshly created method.
    default_line_count
        Number of empty lines a new method starts with.
    data_key
        Key under which the class collection is stored.
    store_path
        JSON file backing ``NotebookStore``.
    """

    default_method_name: str = "new_method"
    default_params: int = Field(default=1, ge=0)
    default_locals: int = Field(default=4, ge=0)
    default_line_count: int = Field(default=8, ge=0)
    data_key: str = DATA_KEY
    store_path: Path = Path("regnote-db.json")


DEFAULT_SETTINGS = NotebookSettings()

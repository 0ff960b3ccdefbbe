"""Notebook editing API.

    from regnote.notebook import create_class, add_method, update_line

    cls = add_method(create_class("com.app.Login", "Login"), "checkPassword")
    method = update_line(cls.methods[0], cls.methods[0].lines[0].id, script="v0 = 1")
"""

from regnote.model.notebook import new_uid

from ._collection import add_method, find_class, find_method, replace_method
from ._factories import (
    append_line,
    create_class,
    create_method,
    next_line_index,
    update_line,
)

__all__ = [
    "add_method",
    "append_line",
    "create_class",
    "create_method",
    "find_class",
    "find_method",
    "new_uid",
    "next_line_index",
    "replace_method",
    "update_line",
]

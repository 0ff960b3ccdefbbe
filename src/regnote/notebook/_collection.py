"""Operations on the class collection."""

from __future__ import annotations

from regnote.config import NotebookSettings
from regnote.model.collection import NotebookClass
from regnote.model.notebook import Method

from ._factories import create_method


def add_method(
    cls: NotebookClass,
    name: str,
    *,
    settings: NotebookSettings | None = None,
) -> NotebookClass:
    """Return *cls* with a newly created method appended."""
    method = create_method(name, settings=settings)
    return cls.model_copy(update={"methods": [*cls.methods, method]})


def replace_method(
    classes: list[NotebookClass],
    method: Method,
) -> list[NotebookClass]:
    """Swap in *method* wherever a method with the same id lives.

    Classes that do not hold it are returned as-is.
    """
    result = []
    for cls in classes:
        if cls.find_method(method.id) is None:
            result.append(cls)
            continue
        methods = [method if m.id == method.id else m for m in cls.methods]
        result.append(cls.model_copy(update={"methods": methods}))
    return result


def find_class(classes: list[NotebookClass], class_id: str) -> NotebookClass | None:
    for cls in classes:
        if cls.id == class_id:
            return cls
    return None


def find_method(
    classes: list[NotebookClass],
    class_id: str,
    method_id: str,
) -> Method | None:
    cls = find_class(classes, class_id)
    if cls is None:
        return None
    return cls.find_method(method_id)

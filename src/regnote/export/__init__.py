"""regnote export — notebook documents.

Public API::

    from regnote.export import export_method, import_method
    text = export_method(method)
    method = import_method(text, keep_id=method.id)
"""

from .document import export_filename, export_method, import_method

__all__ = ["export_filename", "export_method", "import_method"]

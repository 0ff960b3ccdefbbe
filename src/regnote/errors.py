"""Exceptions raised by the notebook layer.

The simulation engine itself raises nothing: malformed scripts degrade
to no-ops.  These errors only come from factories and import.
"""


class NotebookError(Exception):
    """Base class for notebook errors."""


class InvalidNameError(NotebookError):
    """A class or method was created without a required name."""


class InvalidNotebookError(NotebookError):
    """An imported document is not a usable method notebook."""

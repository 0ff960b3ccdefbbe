"""Class records grouping method notebooks."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .notebook import Method, new_uid, now_ms


class NotebookClass(BaseModel):
    """A class under analysis.

    Tracked under three names: the real (deobfuscated) name, the
    obfuscated name found in the binary, and a friendly display name.
    """

    id: str = Field(default_factory=lambda: f"cls_{new_uid()}")
    real_name: str
    obfuscated_name: str = ""
    friendly_name: str
    created_at: int = Field(default_factory=now_ms)
    methods: list[Method] = []

    def find_method(self, method_id: str) -> Method | None:
        for method in self.methods:
            if method.id == method_id:
                return method
        return None

"""Local persistence for the class collection.

A single JSON file maps keys to blobs; the collection lives under
``DATA_KEY``.  Access failures are logged and degrade to an empty result
so a broken store never blocks editing.
"""

from __future__ import annotations

import asyncio
import json
import logging
import threading
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from regnote.config import DATA_KEY, DEFAULT_SETTINGS, NotebookSettings
from regnote.model.collection import NotebookClass

logger = logging.getLogger(__name__)

_CLASSES = TypeAdapter(list[NotebookClass])


class NotebookStore:
    """Async get/set-by-key store backed by one JSON file."""

    def __init__(
        self,
        path: Path | str | None = None,
        *,
        settings: NotebookSettings | None = None,
    ) -> None:
        self._settings = settings or DEFAULT_SETTINGS
        self._path = Path(path) if path is not None else self._settings.store_path
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------ helpers

    def _read_all(self) -> dict[str, Any]:
        with self._lock:
            return self._read_unlocked()

    def _read_unlocked(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        payload = json.loads(self._path.read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError(f"{self._path} does not hold a key/value mapping")
        return payload

    def _write_key(self, key: str, value: Any) -> None:
        with self._lock:
            try:
                payload = self._read_unlocked()
            except ValueError:
                # A corrupt store file is replaced rather than patched.
                logger.warning("overwriting unreadable store %s", self._path)
                payload = {}
            payload[key] = value
            tmp_path = self._path.with_suffix(".tmp")
            tmp_path.write_text(json.dumps(payload, sort_keys=True), encoding="utf-8")
            tmp_path.replace(self._path)

    # ----------------------------------------------------------------- public API

    async def get(self, key: str = DATA_KEY) -> Any:
        """Stored value for *key*, or None if missing or unreadable."""
        try:
            payload = await asyncio.to_thread(self._read_all)
        except (OSError, ValueError):
            logger.exception("failed to read %s", self._path)
            return None
        return payload.get(key)

    async def set(self, value: Any, key: str = DATA_KEY) -> None:
        """Store *value* under *key*, replacing the file atomically."""
        try:
            await asyncio.to_thread(self._write_key, key, value)
        except (OSError, ValueError, TypeError):
            logger.exception("failed to write %r to %s", key, self._path)

    async def load_classes(self) -> list[NotebookClass]:
        """The stored class collection; empty when absent or invalid."""
        blob = await self.get(self._settings.data_key)
        if blob is None:
            return []
        try:
            return _CLASSES.validate_python(blob)
        except ValidationError:
            logger.exception("discarding invalid class collection in %s", self._path)
            return []

    async def save_classes(self, classes: list[NotebookClass]) -> None:
        await self.set(_CLASSES.dump_python(classes, mode="json"), self._settings.data_key)


__all__ = ["NotebookStore", "DATA_KEY"]

"""JSON file storage shared by the file-backed repositories."""

import json
import logging
import os
import shutil
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from macro_tracker.domain.errors import StorageError

_logger = logging.getLogger(__name__)

# Serializes read-modify-write cycles across every store in the process.
_LOCK = threading.RLock()


@dataclass
class JsonFileStore:
    """A single JSON document on disk, created with a default on first use."""

    path: Path
    default: Callable[[], object]

    def read(self) -> object:
        """Return the parsed document."""
        with _LOCK:
            self._ensure_file()
            raw = self.path.read_text(encoding="utf-8")
            try:
                return json.loads(raw)
            except json.JSONDecodeError as exc:
                raise StorageError(f"Corrupt JSON in {self.path}") from exc

    def write(self, data: object) -> None:
        """Replace the document atomically."""
        with _LOCK:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_name(f".{self.path.name}.tmp")
            tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
            os.replace(tmp_path, self.path)
            _logger.info("Wrote %s", self.path)

    def update(self, mutate: Callable[[object], object]) -> object:
        """Read, transform and write the document under the store lock."""
        with _LOCK:
            data = mutate(self.read())
            self.write(data)
            return data

    def backup(self) -> str | None:
        """Copy the document next to itself with a millisecond timestamp."""
        with _LOCK:
            if not self.path.exists():
                return None
            stamp = int(time.time() * 1000)
            backup_path = self.path.with_name(
                f"{self.path.stem}-backup-{stamp}{self.path.suffix}"
            )
            shutil.copyfile(self.path, backup_path)
            _logger.info("Backed up %s to %s", self.path, backup_path)
            return str(backup_path)

    def _ensure_file(self) -> None:
        if self.path.exists():
            return
        _logger.info("Initializing %s", self.path)
        self.write(self.default())

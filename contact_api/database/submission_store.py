"""
Submission store - the JSON array file holding every accepted submission
"""
import json
import os
import stat
import tempfile
import threading
from pathlib import Path
from typing import Dict, List, Any

from contact_api.utils.exceptions import SubmissionStoreError

# One lock per resolved file path, shared by every store pointing at it
_PATH_LOCKS: Dict[str, threading.Lock] = {}
_PATH_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.Lock:
    key = str(path.resolve())
    with _PATH_LOCKS_GUARD:
        return _PATH_LOCKS.setdefault(key, threading.Lock())


class SubmissionStore:
    """
    Append-only list of submissions persisted as a single JSON array.

    Every append reads the whole file, adds the record and rewrites the file
    through a temporary sibling that replaces the original, so a failed write
    never leaves a truncated array behind. Appends from threads of this
    process are serialized; other processes writing the same file are not
    coordinated.
    """

    def __init__(self, path):
        self.path = Path(path)
        self._lock = _lock_for(self.path)

    def ensure_exists(self) -> bool:
        """Create the file holding an empty array if it is missing"""
        with self._lock:
            if self.path.exists():
                return False
            self._write([])
            return True

    def read_all(self) -> List[Dict[str, Any]]:
        """All stored submissions, oldest first (missing file reads as empty)"""
        with self._lock:
            return self._read()

    def append(self, record: Dict[str, Any]) -> int:
        """Append one record and return the new number of submissions"""
        with self._lock:
            records = self._read()
            records.append(record)
            self._write(records)
            return len(records)

    def count(self) -> int:
        return len(self.read_all())

    def _read(self) -> List[Dict[str, Any]]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as exc:
            raise SubmissionStoreError(f"Could not read {self.path}: {exc}") from exc

        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise SubmissionStoreError(f"{self.path} does not contain valid JSON: {exc}") from exc

        if not isinstance(data, list):
            raise SubmissionStoreError(
                f"{self.path} must contain a JSON array, found {type(data).__name__}"
            )
        return data

    def _write(self, records: List[Dict[str, Any]]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            mode = stat.S_IMODE(self.path.stat().st_mode) if self.path.exists() else 0o644
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            tmp_path = Path(tmp_name)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(records, f, ensure_ascii=False, indent=2)
                    f.flush()
                    os.fsync(f.fileno())
                os.chmod(tmp_path, mode)
                tmp_path.replace(self.path)
            except BaseException:
                tmp_path.unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise SubmissionStoreError(f"Could not write {self.path}: {exc}") from exc

"""Atomic, concurrency-safe JSON file operations for carts and result handoff."""

import json
import os
import tempfile
from filelock import FileLock
from typing import Any


class FileStore:

    @staticmethod
    def _lock_path(file_path: str) -> str:
        return f"{file_path}.lock"

    @staticmethod
    def read_json(file_path: str, default: Any = None) -> Any:
        lock = FileLock(FileStore._lock_path(file_path))
        with lock:
            if not os.path.exists(file_path):
                return default
            with open(file_path, "r") as f:
                return json.load(f)

    @staticmethod
    def write_json(file_path: str, data: Any) -> None:
        os.makedirs(os.path.dirname(file_path), exist_ok=True)
        lock = FileLock(FileStore._lock_path(file_path))
        with lock:
            fd, tmp = tempfile.mkstemp(
                dir=os.path.dirname(file_path), suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w") as f:
                    json.dump(data, f, indent=2, default=str)
                os.replace(tmp, file_path)
            except Exception:
                if os.path.exists(tmp):
                    os.unlink(tmp)
                raise

    @staticmethod
    def pop_json(file_path: str, default: Any = None) -> Any:
        """Read a JSON document and delete it under the same lock."""
        lock = FileLock(FileStore._lock_path(file_path))
        with lock:
            if not os.path.exists(file_path):
                return default
            with open(file_path, "r") as f:
                data = json.load(f)
            os.unlink(file_path)
            return data

    @staticmethod
    def delete(file_path: str) -> None:
        lock = FileLock(FileStore._lock_path(file_path))
        with lock:
            if os.path.exists(file_path):
                os.unlink(file_path)

"""File and directory helpers for saving scraped output.

Thin wrappers over ``os``/``shutil`` that log each operation. Errors are
logged and re-raised unchanged.
"""
import json
import logging
import os
import shutil
from typing import Any

log = logging.getLogger(__name__)


class FileManager:
    """Handles files and directories."""

    def create_directory(self, dir_path: str, recursive: bool = False) -> None:
        """Create ``dir_path``.

        With ``recursive`` missing parents are created and an existing
        directory is not an error. Without it this is a single ``mkdir``.
        """
        try:
            if recursive:
                os.makedirs(dir_path, exist_ok=True)
            else:
                os.mkdir(dir_path)
            log.info(f"Directory already exists or was created: {dir_path}")
        except OSError as e:
            log.error(f"Error creating directory {dir_path}: {e}")
            raise

    def delete_directory(self, dir_path: str) -> None:
        self.delete_path(dir_path, recursive=True)

    def directory_exists(self, dir_path: str) -> bool:
        return self.path_exists(dir_path)

    def read_file(self, file_path: str, encoding: str | None = "utf-8") -> str | bytes:
        """Read the whole file. ``encoding=None`` returns bytes."""
        try:
            if encoding is None:
                with open(file_path, "rb") as f:
                    data = f.read()
            else:
                with open(file_path, "r", encoding=encoding) as f:
                    data = f.read()
            log.info(f"Read file at path: {file_path}")
            return data
        except FileNotFoundError as e:
            log.error(f"File not found: {e}")
            raise
        except OSError as e:
            log.error(f"Error reading file {file_path}: {e}")
            raise

    def write_file(self, file_path: str, data: str | bytes) -> None:
        """Write ``data``, replacing the file if it already exists."""
        try:
            _write(file_path, data, "w")
            log.info(f"Wrote data to file at: {file_path}")
        except OSError as e:
            log.error(f"Error writing file at {file_path}: {e}")
            raise

    def append_to_file(self, file_path: str, data: str | bytes) -> None:
        """Append ``data``, creating the file if it does not yet exist."""
        try:
            _write(file_path, data, "a")
            log.info(f"Appended data to file at path: {file_path}")
        except OSError as e:
            log.error(f"Error appending to file {file_path}: {e}")
            raise

    def delete_file(self, file_path: str) -> None:
        self.delete_path(file_path)

    def file_exists(self, file_path: str) -> bool:
        return self.path_exists(file_path)

    def save_json(self, file_path: str, data: Any, pretty_print: bool = False) -> None:
        """Save ``data`` as JSON, indented by two spaces when ``pretty_print``.

        A ``str`` is taken as already-serialized JSON and written as-is.
        """
        try:
            if isinstance(data, str):
                payload = data
            elif pretty_print:
                payload = json.dumps(data, indent=2, ensure_ascii=False)
            else:
                payload = json.dumps(data, ensure_ascii=False)
            _write(file_path, payload, "w")
            log.info(f"JSON file saved at path {file_path}")
        except (OSError, TypeError, ValueError) as e:
            log.error(f"Error saving JSON file {file_path}: {e}")
            raise

    def delete_path(self, path: str, recursive: bool = False) -> None:
        """Delete ``path``.

        A non-empty directory is only removed when ``recursive`` is true.
        A dangling symlink is unlinked.
        A missing path is logged as a warning and ignored.
        """
        try:
            if not os.path.lexists(path):
                log.warning(f"Non-existing path can't be removed: {path}")
                return
            if os.path.isdir(path) and not os.path.islink(path):
                if recursive:
                    shutil.rmtree(path)
                else:
                    os.rmdir(path)
            else:
                os.remove(path)
            log.info(f"Deleted path: {path}")
        except OSError as e:
            log.error(f"Error deleting {path}: {e}")
            raise

    def path_exists(self, path: str) -> bool:
        """``True`` if the path exists, following symlinks."""
        return os.path.exists(path)


def _write(file_path: str, data: str | bytes, mode: str) -> None:
    if isinstance(data, bytes):
        with open(file_path, mode + "b") as f:
            f.write(data)
    else:
        with open(file_path, mode, encoding="utf-8") as f:
            f.write(data)

"""files — file and directory helpers."""
from .manager import FileManager  # noqa: F401

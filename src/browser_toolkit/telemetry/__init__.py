"""telemetry — structured JSONL action logging."""
from .logger import ActionEventLogger  # noqa: F401

"""
Uploadable Error Hierarchy — Structured exceptions for upload configuration.

All errors carry their context as keyword arguments so they serialize cleanly
to JSON for logs.

Hierarchy:
    UploadableError
    ├── UploadableConfigError      — Invalid or unreadable uploadable.yaml
    └── UploadableValidationError  — Configured value failed a read-time check
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


class UploadableError(Exception):
    """
    Base error for all uploadable failures.
    All context is serializable to JSON.
    """

    def __init__(self, message: str, **context: Any):
        self.message = message
        self.option: Optional[str] = context.get("option")
        self.value: Optional[Any] = context.get("value")
        self.error_type: str = self.__class__.__name__
        self.context: Dict[str, Any] = context
        self.timestamp: str = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error to a JSON-compatible dict."""
        return {
            "error_type": self.error_type,
            "message": self.message,
            "option": self.option,
            "value": None if self.value is None else str(self.value),
            "timestamp": self.timestamp,
            "context": {
                k: str(v) for k, v in self.context.items()
                if k not in ("option", "value")
            },
        }

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), default=str)

    def __repr__(self) -> str:
        parts = [f"{self.error_type}: {self.message}"]
        if self.option:
            parts.append(f"option={self.option}")
        if self.value is not None:
            parts.append(f"value={self.value!r}")
        return " | ".join(parts)


class UploadableConfigError(UploadableError):
    """Configuration error — invalid or unreadable uploadable.yaml."""

    def __init__(self, message: str, **context: Any):
        self.config_path: Optional[str] = context.get("config_path")
        super().__init__(message, **context)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["config_path"] = self.config_path
        return d


class UploadableValidationError(UploadableError):
    """
    A configured value failed validation when it was read.
    Includes field-level error details when available.
    """

    def __init__(self, message: str, **context: Any):
        self.validation_errors: Optional[List[Any]] = context.get("validation_errors")
        super().__init__(message, **context)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["validation_errors"] = self.validation_errors
        return d

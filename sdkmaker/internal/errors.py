"""
Ошибки конвейера генерации SDK
"""

import json
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    VALIDATION = "ValidationError"
    CONTENT_PARSING = "ContentParsingError"
    NETWORK = "NetworkError"


# kind -> (category, severity)
_KIND_METADATA = {
    ErrorKind.VALIDATION: ("Input Validation", "Warning"),
    ErrorKind.CONTENT_PARSING: ("Content Parsing Error", "Error"),
    ErrorKind.NETWORK: ("Network Operation", "Error"),
}


class GenerationError(Exception):
    """Единая ошибка конвейера с закрытым набором видов (ErrorKind)

    Экземпляры создаются только через фабрики validation(),
    content_parsing() и network().
    """

    def __init__(
        self,
        kind: ErrorKind,
        method_name: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.kind = kind
        self.method_name = method_name
        self.message = message
        self.details = dict(details or {})
        self.category, self.severity = _KIND_METADATA[kind]
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(f"[{kind.value}] in {method_name}: {message}")

    @classmethod
    def validation(
        cls, method_name: str, message: str, details: Optional[Dict[str, Any]] = None
    ) -> "GenerationError":
        return cls(ErrorKind.VALIDATION, method_name, message, details)

    @classmethod
    def content_parsing(
        cls, method_name: str, message: str, details: Optional[Dict[str, Any]] = None
    ) -> "GenerationError":
        return cls(ErrorKind.CONTENT_PARSING, method_name, message, details)

    @classmethod
    def network(
        cls, method_name: str, message: str, details: Optional[Dict[str, Any]] = None
    ) -> "GenerationError":
        return cls(ErrorKind.NETWORK, method_name, message, details)

    def to_dict(self) -> Dict[str, Any]:
        """Структурированное представление для логов и машинного вывода"""
        return {
            "type": self.kind.value,
            "method_name": self.method_name,
            "message": self.message,
            "details": self.details,
            "category": self.category,
            "severity": self.severity,
            "timestamp": self.timestamp,
        }

    def describe(self) -> str:
        """Подробное человекочитаемое описание"""
        return (
            f"{self}\n"
            f"Error Type: {self.kind.value}\n"
            f"Method: {self.method_name}\n"
            f"Time: {self.timestamp}\n"
            f"Details: {json.dumps(self.details, indent=2, default=str)}"
        )

"""Генератор TypeScript SDK из OpenAPI/Swagger спецификаций"""

from .generator import SdkGenerator, generate_project, make_sdk
from .internal.errors import ErrorKind, GenerationError

__all__ = [
    "SdkGenerator",
    "generate_project",
    "make_sdk",
    "ErrorKind",
    "GenerationError",
]

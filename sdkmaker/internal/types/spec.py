"""
Доменные модели: входные данные и организованная OpenAPI спецификация
"""

import os
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict

from ..utils.url import is_valid_url


class InputKind(str, Enum):
    PATH = "path"
    INLINE = "inline"
    URL = "url"


class RawInput(BaseModel):
    """Источник спецификации: путь к файлу, текст или URL"""

    model_config = ConfigDict(frozen=True)

    kind: InputKind
    value: str

    @classmethod
    def detect(cls, value: str) -> "RawInput":
        """Определение вида источника по строке"""
        if is_valid_url(value):
            return cls(kind=InputKind.URL, value=value.strip())
        if "\n" not in value and os.path.isfile(value):
            return cls(kind=InputKind.PATH, value=value)
        return cls(kind=InputKind.INLINE, value=value)


class OperationParameter(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    location: str = "query"
    required: bool = False
    description: Optional[str] = None
    schema_: Dict[str, Any] = {}


class Operation(BaseModel):
    """Одна операция (метод + путь) из OpenAPI"""

    model_config = ConfigDict(frozen=True)

    method: str
    path: str
    operation_id: str
    summary: Optional[str] = None
    tags: List[str] = []
    parameters: List[OperationParameter] = []
    request_body: Optional[Dict[str, Any]] = None
    responses: Optional[Dict[str, Any]] = None


class Group(BaseModel):
    """Контроллер - именованный набор операций"""

    model_config = ConfigDict(frozen=True)

    name: str
    operations: List[Operation] = []


class OrganizedModel(BaseModel):
    """Результат организации спецификации, общий вход для всех генераторов"""

    model_config = ConfigDict(frozen=True)

    groups: List[Group] = []
    components: Dict[str, Any] = {}
    base_url: str = ""
    name: Optional[str] = None
    description: str = ""
    version: str = ""

    def group(self, name: str) -> Optional[Group]:
        for group in self.groups:
            if group.name == name:
                return group
        return None

    def non_empty_groups(self) -> List[Group]:
        return [group for group in self.groups if group.operations]

    def operations(self) -> Iterator[Operation]:
        for group in self.groups:
            yield from group.operations

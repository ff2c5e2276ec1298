import logging
import re
from typing import Any, Dict, List, Optional

import jsonref

from ..errors import GenerationError
from ..types.spec import Group, Operation, OperationParameter, OrganizedModel

logger = logging.getLogger(__name__)

DEFAULT_CONTROLLER = "DefaultController"
INTERNAL_MARKER = "Controller_"
HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def is_valid_operation(operation_id: Optional[str]) -> bool:
    """Операции без operationId и служебные (Controller_*) пропускаются"""
    return bool(operation_id) and INTERNAL_MARKER not in operation_id


def get_controller_name(tags: Optional[List[str]]) -> str:
    return tags[0] if tags else DEFAULT_CONTROLLER


class OpenApiParser:
    """Парсер OpenAPI спецификации: группировка операций по контроллерам"""

    def __init__(self, openapi_dict: Dict[str, Any]):
        self.openapi_dict = openapi_dict
        self._resolved = None

    def parse(self) -> OrganizedModel:
        """Парсинг OpenAPI в OrganizedModel"""
        if (
            not isinstance(self.openapi_dict, dict)
            or self.openapi_dict.get("paths") is None
        ):
            raise GenerationError.validation(
                "organize_controllers", "Invalid Swagger document: missing paths"
            )

        controllers: Dict[str, List[Operation]] = {}

        for path, path_item in (self.openapi_dict.get("paths") or {}).items():
            if not isinstance(path_item, dict):
                continue

            for method, operation in path_item.items():
                if method.lower() not in HTTP_METHODS or not isinstance(operation, dict):
                    continue
                self._process_operation(controllers, path, method, operation, path_item)

        info = self.openapi_dict.get("info") or {}
        servers = self.openapi_dict.get("servers") or []
        title = info.get("title")

        model = OrganizedModel(
            groups=[Group(name=name, operations=ops) for name, ops in controllers.items()],
            components=self.openapi_dict.get("components") or {},
            base_url=(servers[0] or {}).get("url", "") if servers else "",
            name=re.sub(r"\s+", "", title) if isinstance(title, str) else None,
            description=info.get("description") or "",
            version=str(info.get("version") or ""),
        )
        logger.info(
            "Найдено %d контроллеров, %d операций",
            len(model.groups),
            sum(len(g.operations) for g in model.groups),
        )
        return model

    def _process_operation(
        self,
        controllers: Dict[str, List[Operation]],
        path: str,
        method: str,
        operation: Dict[str, Any],
        path_item: Dict[str, Any],
    ):
        operation_id = operation.get("operationId")
        if not is_valid_operation(operation_id):
            logger.debug("Пропуск операции %s %s (%s)", method.upper(), path, operation_id)
            return

        controller_name = get_controller_name(operation.get("tags"))
        controllers.setdefault(controller_name, []).append(
            Operation(
                method=method.lower(),
                path=path,
                operation_id=operation_id,
                summary=operation.get("summary"),
                tags=list(operation.get("tags") or []),
                parameters=self._merge_parameters(
                    path_item.get("parameters"), operation.get("parameters")
                ),
                request_body=operation.get("requestBody"),
                responses=operation.get("responses"),
            )
        )

    def _merge_parameters(
        self, path_level: Optional[List[Any]], operation_level: Optional[List[Any]]
    ) -> List[OperationParameter]:
        """Параметры пути + операции; параметр операции переопределяет одноименный"""
        merged: Dict[tuple, OperationParameter] = {}

        for raw in list(path_level or []) + list(operation_level or []):
            parameter = self._create_parameter(raw)
            if parameter is None:
                continue
            merged[(parameter.name, parameter.location)] = parameter

        return list(merged.values())

    def _create_parameter(self, raw: Any) -> Optional[OperationParameter]:
        if not isinstance(raw, dict):
            return None

        if "$ref" in raw:
            raw = self._dereference(raw["$ref"])
            if raw is None:
                return None

        name = raw.get("name")
        if not name:
            return None

        schema = raw.get("schema")
        return OperationParameter(
            name=name,
            location=raw.get("in") or "query",
            required=bool(raw.get("required", False)),
            description=raw.get("description"),
            schema_=_plain(schema) if isinstance(schema, dict) else {},
        )

    def _dereference(self, ref: str) -> Optional[Dict[str, Any]]:
        """Разрешение $ref параметра (#/components/parameters/...) через jsonref"""
        if self._resolved is None:
            self._resolved = jsonref.replace_refs(self.openapi_dict)

        try:
            target = _follow_pointer(self._resolved, ref)
            return _plain(target) if target is not None else None
        except jsonref.JsonRefError as e:
            logger.warning("Не удалось разрешить ссылку %s: %s", ref, e)
            return None


def organize(openapi_dict: Dict[str, Any]) -> OrganizedModel:
    return OpenApiParser(openapi_dict).parse()


def _unwrap(node: Any, ref: str) -> Optional[Any]:
    """Цепочка ссылок ($ref на $ref) до конечного объекта; цикл -> None"""
    seen = set()
    while isinstance(node, jsonref.JsonRef):
        if id(node) in seen:
            logger.warning("Циклическая ссылка %s", ref)
            return None
        seen.add(id(node))
        node = node.__subject__
    return node


def _follow_pointer(document: Any, ref: str) -> Optional[Any]:
    if not ref.startswith("#/"):
        logger.warning("Внешние ссылки не поддерживаются: %s", ref)
        return None

    node = document
    for token in ref[2:].split("/"):
        token = token.replace("~1", "/").replace("~0", "~")
        try:
            node = _unwrap(node, ref)[token]
        except (KeyError, IndexError, TypeError):
            logger.warning("Не удалось разрешить ссылку %s", ref)
            return None
    return _unwrap(node, ref)


def _plain(value: Any, seen: frozenset = frozenset()) -> Any:
    """
    Копия фрагмента из обычных dict/list.

    Вложенные ссылки остаются объектами {"$ref": ...}, поэтому схема
    параметра сохраняет имя модели; циклы по вложенности обрываются.
    """
    if isinstance(value, jsonref.JsonRef):
        return _plain(value.__reference__, seen)

    if isinstance(value, dict):
        if id(value) in seen:
            logger.debug("Цикл во фрагменте документа пропущен")
            return {}
        seen = seen | {id(value)}
        return {str(k): _plain(v, seen) for k, v in value.items()}

    if isinstance(value, (list, tuple)):
        if id(value) in seen:
            return []
        seen = seen | {id(value)}
        return [_plain(v, seen) for v in value]

    return value

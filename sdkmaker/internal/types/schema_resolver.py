"""
Разрешение OpenAPI схем в типовые выражения TypeScript.

Все функции чистые: результат зависит только от фрагмента схемы
и имени объявляющей её схемы.
"""

from typing import Any, Dict, Optional

from ..utils.naming import to_identifier
from .models import Variable

ANY = "any"
JSON_MEDIA_TYPE = "application/json"

# Подстроки, вырезаемые из имени схемы при построении имени enum
ENUM_NAME_STRIP = ("Dto", "Create", "Get")


def ref_name(ref: str) -> str:
    """Имя схемы из JSON pointer: '#/components/schemas/User' -> 'User'"""
    return ref.rsplit("/", 1)[-1]


def enum_name(schema_name: str, property_name: str) -> str:
    """
    Имя enum типа для свойства схемы.

    Examples:
        >>> enum_name("CreateUserDto", "role")
        'UserRoleEnum'
    """
    base = schema_name
    for fragment in ENUM_NAME_STRIP:
        base = base.replace(fragment, "", 1)

    return to_identifier(f"{base}{property_name[:1].upper()}{property_name[1:]}Enum")


def _primitive(schema: Dict[str, Any]) -> Optional[str]:
    declared = schema.get("type")
    if isinstance(declared, str) and declared:
        return declared
    # OpenAPI 3.1: type: [string, "null"]
    if isinstance(declared, list) and declared:
        return str(Variable(value=[str(_) for _ in declared], wrap_name="Union"))
    return None


def _array_item_type(items: Any) -> str:
    if not isinstance(items, dict):
        return ANY
    if "$ref" in items:
        return ref_name(items["$ref"])
    return _primitive(items) or ANY


def property_type(schema: Dict[str, Any], schema_name: str, property_name: str) -> str:
    """Тип свойства property_name схемы schema_name"""
    properties = schema.get("properties") or {}
    property_schema = properties.get(property_name)

    if not isinstance(property_schema, dict):
        return ANY

    if property_schema.get("enum"):
        return enum_name(schema_name, property_name)

    if property_schema.get("type") == "array":
        return str(
            Variable(value=_array_item_type(property_schema.get("items")), wrap_name="Array")
        )

    if "$ref" in property_schema:
        return ref_name(property_schema["$ref"])

    return _primitive(property_schema) or ANY


def _json_schema(container: Any) -> Optional[Dict[str, Any]]:
    """schema из content['application/json'] или None"""
    if not isinstance(container, dict):
        return None

    media = (container.get("content") or {}).get(JSON_MEDIA_TYPE)
    if not isinstance(media, dict):
        return None

    schema = media.get("schema")
    return schema if isinstance(schema, dict) else None


def request_body_type(request_body: Optional[Dict[str, Any]]) -> str:
    """Тип тела запроса - ссылка на модель или any"""
    schema = _json_schema(request_body)
    if schema and "$ref" in schema:
        return f"models.{ref_name(schema['$ref'])}"

    return ANY


def response_type(responses: Optional[Dict[str, Any]]) -> str:
    """
    Тип ответа операции.

    Учитывается только ответ 'default'; ответы с явными кодами
    ('200', '201', ...) не рассматриваются.
    """
    schema = _json_schema((responses or {}).get("default"))
    if schema is None:
        return ANY

    if "$ref" in schema:
        return f"models.{ref_name(schema['$ref'])}"

    if schema.get("type") == "array" and schema.get("items"):
        items = schema["items"]
        if isinstance(items, dict) and "$ref" in items:
            return f"models.{ref_name(items['$ref'])}[]"
        return "any[]"

    if schema.get("type") == "object":
        return "Record<string, any>"

    return ANY


def is_required(schema: Dict[str, Any], property_name: str) -> bool:
    return property_name in (schema.get("required") or [])


def parameter_type(parameter_schema: Optional[Dict[str, Any]]) -> str:
    """Тип параметра операции (path/query/header)"""
    if not isinstance(parameter_schema, dict):
        return ANY

    if "$ref" in parameter_schema:
        return f"models.{ref_name(parameter_schema['$ref'])}"

    if parameter_schema.get("enum"):
        values = [str(value) for value in parameter_schema["enum"]]
        return str(Variable(value=values, wrap_name="Literal"))

    if parameter_schema.get("type") == "array":
        items = parameter_schema.get("items")
        item_type = _array_item_type(items)
        if isinstance(items, dict) and "$ref" in items:
            item_type = f"models.{item_type}"
        return str(Variable(value=item_type, wrap_name="Array"))

    return _primitive(parameter_schema) or ANY

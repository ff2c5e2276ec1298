"""
Генерация TypeScript моделей (models.ts) из components/schemas
"""

from typing import Any, Dict, List, Union

from ..types.models import CodeFile, Interface, TypeAlias, Variable
from ..types.schema_resolver import enum_name, is_required, property_type


def _properties(schema: Any) -> Dict[str, Any]:
    if not isinstance(schema, dict):
        return {}
    properties = schema.get("properties")
    return properties if isinstance(properties, dict) else {}


def generate_enums(schemas: Dict[str, Any]) -> List[TypeAlias]:
    """Объявления enum типов для всех свойств с enum, в порядке схем"""
    enums = []
    for schema_name, schema in schemas.items():
        for property_name, property_schema in _properties(schema).items():
            if not isinstance(property_schema, dict) or not property_schema.get("enum"):
                continue

            values = [str(value) for value in property_schema["enum"]]
            enums.append(
                TypeAlias(
                    name=enum_name(schema_name, property_name),
                    var_type=Variable(value=values, wrap_name="Literal"),
                )
            )
    return enums


def generate_model(schema_name: str, schema: Any) -> Union[Interface, TypeAlias]:
    """Одна модель: interface по properties или псевдоним типа"""
    properties = _properties(schema)

    if not properties:
        # Схема без свойств: enum или произвольный объект
        if isinstance(schema, dict) and schema.get("enum"):
            values = [str(value) for value in schema["enum"]]
            return TypeAlias(name=schema_name, var_type=Variable(value=values, wrap_name="Literal"))
        return TypeAlias(name=schema_name, var_type="Record<string, any>")

    interface = Interface(name=schema_name)
    for property_name in properties:
        interface.add_property(
            property_name,
            var_type=property_type(schema, schema_name, property_name),
            optional=not is_required(schema, property_name),
        )
    return interface


def generate_models(components: Dict[str, Any], file_name: str = "src/models.ts") -> CodeFile:
    """
    Файл моделей: сначала все enum, затем interface для каждой схемы.

    Raises:
        ValueError: в components нет schemas
    """
    schemas = components.get("schemas") if isinstance(components, dict) else None
    if not isinstance(schemas, dict):
        raise ValueError("Invalid components object: missing schemas")

    code_file = CodeFile(file_name=file_name)
    code_file.declarations.extend(generate_enums(schemas))
    code_file.declarations.extend(
        generate_model(schema_name, schema) for schema_name, schema in schemas.items()
    )
    return code_file

"""
Генерация функций-обёрток над HTTP вызовами для каждого контроллера
"""

import logging
import re
from typing import Dict, List, Tuple

from ..types.models import CodeBlock, CodeFile, Function, Parameter, Variable
from ..types.schema_resolver import parameter_type, request_body_type, response_type
from ..types.spec import Group, Operation, OperationParameter
from ..utils.naming import is_identifier, quote_literal, to_identifier

logger = logging.getLogger(__name__)

BODY_ARGUMENT = "data"
CLIENT_ARGUMENT = "client"

# Имена, занятые в теле сгенерированных функций и обёрток createClient
RESERVED_NAMES = frozenset({CLIENT_ARGUMENT, BODY_ARGUMENT, "response", "API", "ErrorResponse"})

CONTROLLER_IMPORTS = [
    "import { AxiosInstance } from 'axios';",
    "import * as models from './models';",
]


def parameter_identifiers(operation: Operation) -> List[Tuple[OperationParameter, str]]:
    """
    Уникальные идентификаторы аргументов для параметров операции.

    Совпадения между параметрами (id в path и в query) и с занятыми
    именами (client, data, response) разрешаются числовым суффиксом.

    Examples:
        query 'client' -> 'client2'; path 'id' + query 'id' -> 'id', 'id2'
    """
    used = set(RESERVED_NAMES)
    result = []
    for parameter in operation.parameters:
        base = to_identifier(parameter.name)
        identifier = base
        suffix = 2
        while identifier in used:
            identifier = f"{base}{suffix}"
            suffix += 1
        used.add(identifier)
        result.append((parameter, identifier))
    return result


def parse_parameters(operation: Operation) -> List[Parameter]:
    """Объявленные параметры операции + тело запроса последним аргументом"""
    parameters = [
        Parameter(name=identifier, var_type=parameter_type(p.schema_))
        for p, identifier in parameter_identifiers(operation)
    ]

    if operation.request_body:
        parameters.append(
            Parameter(name=BODY_ARGUMENT, var_type=request_body_type(operation.request_body))
        )

    return parameters


def path_template(path: str, identifiers: Dict[str, str]) -> str:
    """
    '/users/{id}' -> '/users/${id}' для шаблонной строки.

    identifiers: имя path параметра -> имя аргумента функции.
    Плейсхолдер без объявленного параметра остаётся в пути как есть.
    """

    def substitute(match):
        name = match.group(1)
        if name not in identifiers:
            logger.warning("Параметр пути {%s} не объявлен в %s", name, path)
            return match.group(0)
        return "${" + identifiers[name] + "}"

    return re.sub(r"\{([^}]+)\}", substitute, path)


def _object_literal(entries: List[Tuple[str, str]]) -> str:
    """Литерал { name: identifier, ... } для params/headers"""
    rendered = []
    for name, identifier in entries:
        if identifier == name:
            rendered.append(name)
        else:
            key = name if is_identifier(name) else quote_literal(name)
            rendered.append(f"{key}: {identifier}")
    return "{ " + ", ".join(rendered) + " }"


def _request_code(operation: Operation) -> str:
    identifiers = parameter_identifiers(operation)

    def located(location):
        return [(p.name, identifier) for p, identifier in identifiers if p.location == location]

    query = located("query")
    headers = located("header")

    lines = [
        f"const response = await {CLIENT_ARGUMENT}.request({{",
        f"\turl: `{path_template(operation.path, dict(located('path')))}`,",
        f"\tmethod: '{operation.method.upper()}',",
    ]
    if query:
        lines.append(f"\tparams: {_object_literal(query)},")
    if headers:
        lines.append(f"\theaders: {_object_literal(headers)},")
    if operation.request_body:
        lines.append(f"\t{BODY_ARGUMENT},")
    lines.append("});")
    lines.append("return response.data;")

    return "\n".join(lines)


def generate_method(operation: Operation) -> Function:
    """Одна async функция: ровно один HTTP вызов"""
    return Function(
        name=to_identifier(operation.operation_id),
        parameters=parse_parameters(operation),
        response=Variable(value=response_type(operation.responses), wrap_name="Promise"),
        async_def=True,
        description=operation.summary or operation.operation_id,
        code=CodeBlock(code=_request_code(operation)),
    )


def generate_controller_file(group: Group) -> CodeFile:
    """
    Файл контроллера src/<Group>.ts.

    Экспортирует фабрику, которая получает экземпляр axios явно
    и возвращает объект со всеми функциями контроллера.
    """
    controller_name = to_identifier(group.name)
    code_file = CodeFile(file_name=f"src/{controller_name}.ts", imports=list(CONTROLLER_IMPORTS))

    factory = code_file.add_function(
        controller_name,
        parameters=[Parameter(name=CLIENT_ARGUMENT, var_type="AxiosInstance")],
        exported=True,
        default_export=True,
    )

    method_names = []
    for operation in group.operations:
        method = factory.add_function(generate_method(operation))
        method_names.append(method.name)

    factory.set_code_block(
        "return {\n" + "".join(f"\t{name},\n" for name in method_names) + "};"
    )
    return code_file

"""
Генерация createClient.ts - фабрики клиента SDK.

Фабрика создаёт собственный экземпляр axios, передаёт его контроллерам
и оборачивает каждую операцию так, что ошибка превращается
в {data: null, error, isBusy: false} вместо исключения.
"""

from typing import List, Optional

from ..types.models import CodeBlock, CodeFile, Function, Interface, Parameter, Variable
from ..types.schema_resolver import response_type
from ..types.spec import Group, Operation
from ..utils.naming import quote_literal, to_identifier
from .api_methods import parse_parameters

UNKNOWN_ERROR = "An unknown error occurred"


def config_interface_name(name: Optional[str]) -> str:
    return f"{to_identifier(name or 'Api')}Config"


def _wrapper(operation: Operation) -> Function:
    parameters = parse_parameters(operation)
    method_name = to_identifier(operation.operation_id)
    arguments = ", ".join(p.name for p in parameters)

    return Function(
        name=method_name,
        parameters=parameters,
        response=Variable(
            value=Variable(value=response_type(operation.responses), wrap_name="ApiResponse"),
            wrap_name="Promise",
        ),
        async_def=True,
        code=CodeBlock(
            code=(
                "try {\n"
                f"\tconst response = await API.{method_name}({arguments});\n"
                "\treturn {\n"
                "\t\tdata: response,\n"
                "\t\terror: null,\n"
                "\t\tisBusy: false,\n"
                "\t};\n"
                "} catch (error) {\n"
                "\treturn ErrorResponse(\n"
                f"\t\terror instanceof Error ? error.message : {quote_literal(UNKNOWN_ERROR)},\n"
                "\t);\n"
                "}"
            )
        ),
    )


def generate_create_client_file(
    groups: List[Group],
    name: Optional[str],
    default_base_url: str = "",
    file_name: str = "src/createClient.ts",
) -> CodeFile:
    active = [group for group in groups if group.operations]
    config_name = config_interface_name(name)

    code_file = CodeFile(
        file_name=file_name,
        imports=[
            "import * as models from './models';",
            "import { createAxiosClient } from './axiosClient';",
        ],
    )
    if active:
        code_file.imports.append("import createApi from './API';")

    config = code_file.add_interface(config_name)
    config.add_property("apiKey", var_type="string", optional=True)
    config.add_property("authToken", var_type="string", optional=True)
    config.add_property("baseURL", var_type="string", optional=True)

    api_response = code_file.add_interface("ApiResponse<T>")
    api_response.add_property("data", var_type="T | null")
    api_response.add_property("error", var_type="string | null")
    api_response.add_property("isBusy", var_type="boolean")

    code_file.add_function(
        "ErrorResponse<T>",
        parameters=[Parameter(name="error", var_type="string")],
        response="ApiResponse<T>",
    ).set_code_block("return {\n\terror,\n\tdata: null,\n\tisBusy: false,\n};")

    factory = code_file.add_function(
        "createClient",
        parameters=[
            Parameter(
                name=(
                    "{ apiKey, authToken, baseURL = "
                    f"{quote_literal(default_base_url)} }}: {config_name} = {{}}"
                )
            )
        ],
        exported=True,
    )

    method_names = []
    for group in active:
        for operation in group.operations:
            method_names.append(factory.add_function(_wrapper(operation)).name)

    setup = [
        "const headers: Record<string, string> = {};",
        "if (authToken) {",
        "\theaders['Authorization'] = `Bearer ${authToken}`;",
        "}",
        "if (apiKey) {",
        "\theaders['x-api-key'] = apiKey;",
        "}",
        "const client = createAxiosClient({ baseURL, headers });",
    ]
    if active:
        setup.append("const API = createApi(client);")

    factory.set_code_block(
        "\n".join(setup)
        + "\n\nreturn {\n"
        + "".join(f"\t{method},\n" for method in method_names)
        + "\tclient,\n"
        + "};"
    )

    return code_file

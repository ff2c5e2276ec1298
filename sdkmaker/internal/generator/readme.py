from typing import Any

from ..errors import GenerationError
from ..types.models import CodeBlock, CodeFile
from ..types.spec import Group, Operation
from ..utils.naming import to_identifier
from .api_methods import parse_parameters
from .templates import templates


def _validate_input(groups: Any, name: Any, package_name: Any):
    if not isinstance(groups, list) or not all(isinstance(g, Group) for g in groups):
        raise GenerationError.validation("generate_readme", "Controllers must be a valid list")
    if not name or not isinstance(name, str):
        raise GenerationError.validation("generate_readme", "Name must be a non-empty string")
    if not package_name or not isinstance(package_name, str):
        raise GenerationError.validation(
            "generate_readme", "Package name must be a non-empty string"
        )


def client_variable(name: str) -> str:
    return to_identifier(name.lower())


def format_method_example(operation: Operation, name: str) -> str:
    """Пример вызова операции через клиент"""
    return templates.readme_method.format(
        operation_id=to_identifier(operation.operation_id),
        summary=operation.summary or "No description provided",
        client_var=client_variable(name),
        arguments=", ".join(p.name for p in parse_parameters(operation)),
    )


def generate_readme(
    groups: Any,
    name: Any,
    package_name: Any,
    description: str = "",
    file_name: str = "README.md",
) -> CodeFile:
    """
    README.md сгенерированного SDK.

    Raises:
        GenerationError: не задано имя API, имя пакета или список контроллеров
    """
    _validate_input(groups, name, package_name)

    methods = [
        format_method_example(operation, name)
        for group in groups
        for operation in group.operations
    ]

    sections = [
        templates.readme_header.format(
            name=name,
            description=description,
            package_name=package_name,
            client_var=client_variable(name),
        ),
        templates.readme_usage_intro,
        *methods,
        templates.readme_error_handling.format(name=name),
        templates.readme_footer.format(name=name),
    ]

    code_file = CodeFile(file_name=file_name)
    code_file.add_code_block(CodeBlock(code="\n".join(sections)))
    return code_file

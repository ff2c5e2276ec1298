from typing import Optional, Union

from pydantic import BaseModel, field_validator

from ..utils.naming import is_identifier, quote_literal

INDENT = "  "


def indent(text: str, level: int = 1) -> str:
    """Сдвиг всех непустых строк на level отступов"""
    prefix = INDENT * level
    return "\n".join(prefix + line if line.strip() else "" for line in text.split("\n"))


def normalize(text: str) -> str:
    """Табы в отступы, без хвостовых пробелов и сдвоенных пустых строк"""
    lines = [line.rstrip() for line in text.replace("\t", INDENT).split("\n")]

    result = []
    for line in lines:
        if not line and result and not result[-1]:
            continue
        result.append(line)

    return "\n".join(result).strip("\n")


class Variable(BaseModel):
    """Типовое выражение TypeScript: Wrap<a, b>, 'a' | 'b' или просто имя"""

    value: list[Union["Variable", str]] = []
    wrap_name: Optional[str] = None

    @field_validator("value", mode="before")
    def value_check(cls, value):
        _value = value

        if not isinstance(value, list):
            _value = [value]

        return _value

    def __str__(self):
        if self.wrap_name == "Literal":
            return " | ".join(quote_literal(_) for _ in self.value) or "any"

        if self.wrap_name == "Union":
            return " | ".join(str(_) for _ in self.value) or "any"

        _value = ", ".join(str(_) for _ in self.value)

        if self.wrap_name is None:
            return _value or "any"

        return f"{self.wrap_name}<{_value}>" if _value else "any"


Variable.model_rebuild()


class Parameter(BaseModel):
    name: str

    var_type: Optional[Union[Variable, str]] = None
    optional: bool = False

    def __str__(self):
        return (
            self.name
            + ("?" if self.optional else "")
            + (f": {self.var_type}" if self.var_type else "")
        )

    def as_member(self) -> str:
        """Объявление свойства interface: ключ в кавычках, если это не идентификатор"""
        key = self.name if is_identifier(self.name) else quote_literal(self.name)
        return f"{key}{'?' if self.optional else ''}: {self.var_type or 'any'};"


class CodeBlock(BaseModel):
    code: str = ""

    def __str__(self):
        return normalize(self.code)


class Function(BaseModel):
    name: str
    parameters: list[Parameter] = []
    response: Optional[Union[Variable, str]] = None

    async_def: bool = False
    exported: bool = False
    default_export: bool = False

    description: Optional[str] = None

    functions: dict[str, "Function"] = {}
    code: CodeBlock = CodeBlock()

    def __str__(self) -> str:
        prefix = ""
        if self.exported:
            prefix = "export default " if self.default_export else "export "

        signature = (
            f"{prefix}{'async ' if self.async_def else ''}function {self.name}("
            + ", ".join(map(str, self.parameters))
            + ")"
            + (f": {self.response}" if self.response else "")
        )

        body = "\n\n".join(
            filter(
                bool,
                [str(f) for f in self.functions.values()] + [str(self.code)],
            )
        )

        docstring = self._generate_docstring()

        return normalize(
            (docstring + "\n" if docstring else "")
            + signature
            + " {\n"
            + indent(body)
            + "\n}"
        )

    def _generate_docstring(self) -> str:
        """JSDoc блок из описания и параметров"""
        if not self.description:
            return ""

        lines = ["/**", f" * {self.description}"]
        for param in self.parameters:
            lines.append(f" * @param {{{param.var_type or 'any'}}} {param.name}")
        lines.append(" */")
        return "\n".join(lines)

    def add_function(self, function: Union["Function", str], **kwargs) -> "Function":
        if isinstance(function, str):
            function = Function(name=function, **kwargs)

        self.functions[function.name] = function
        return function

    def set_code_block(self, code_block: Union["CodeBlock", str]) -> "Function":
        if isinstance(code_block, str):
            code_block = CodeBlock(code=code_block)

        self.code = code_block
        return self


Function.model_rebuild()


class Interface(BaseModel):
    name: str
    properties: list[Parameter] = []

    def __str__(self) -> str:
        header = f"export interface {self.name} {{"
        if not self.properties:
            return header + "}"

        return (
            header
            + "\n"
            + "\n".join(indent(prop.as_member()) for prop in self.properties)
            + "\n}"
        )

    def add_property(self, prop: Union[Parameter, str], **kwargs) -> Parameter:
        if isinstance(prop, str):
            prop = Parameter(name=prop, **kwargs)

        self.properties.append(prop)
        return prop


class TypeAlias(BaseModel):
    name: str
    var_type: Union[Variable, str]

    def __str__(self) -> str:
        return f"export type {self.name} = {self.var_type};"


class CodeFile(BaseModel):
    """Файл: импорты, затем объявления, функции и блоки кода в порядке добавления"""

    file_name: str

    imports: list[str] = []
    declarations: list[Union[TypeAlias, Interface]] = []
    functions: dict[str, Function] = {}
    code_blocks: list[CodeBlock] = []

    def __str__(self):
        parts = self.declarations + list(self.functions.values()) + self.code_blocks
        sections = [
            "\n".join(self.imports),
            "\n\n".join(filter(bool, map(str, parts))),
        ]
        content = "\n\n".join(filter(bool, sections))
        return content + "\n" if content else ""

    def add_function(self, function: Union[Function, str], **kwargs) -> Function:
        if isinstance(function, str):
            function = Function(name=function, **kwargs)

        self.functions[function.name] = function
        return function

    def add_interface(self, interface: Union[Interface, str], **kwargs) -> Interface:
        if isinstance(interface, str):
            interface = Interface(name=interface, **kwargs)

        self.declarations.append(interface)
        return interface

    def add_code_block(self, code_block: Union[CodeBlock, str]) -> "CodeFile":
        if isinstance(code_block, str):
            code_block = CodeBlock(code=code_block)

        self.code_blocks.append(code_block)
        return self


class Project(BaseModel):
    name: str
    files: list[CodeFile] = []

    def add_file(self, code_file: CodeFile) -> CodeFile:
        self.files.append(code_file)
        return code_file

    def get_file(self, file_name: str) -> Optional[CodeFile]:
        for code_file in self.files:
            if code_file.file_name == file_name:
                return code_file
        return None

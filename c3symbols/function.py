"""Functions, methods and macros."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

from c3symbols.doc_comment import DocComment
from c3symbols.geometry import Range
from c3symbols.indexable import CompletionItemKind, Indexable, IndexableBuilder
from c3symbols.typeref import Type, type_from_string
from c3symbols.variable import Variable


class FunctionKind(IntEnum):
    """What sort of callable a :class:`Function` is."""

    USER_DEFINED = 0
    METHOD = 1
    MACRO = 2


class Function(Indexable):
    """A function, a method bound to a type, or a macro.

    ``argument_ids`` lists the names of the signature's arguments, in order;
    the arguments themselves live in ``variables`` with every other local.
    """

    def __init__(
        self,
        name: str,
        return_type: Type,
        argument_ids: Iterable[str],
        module: str,
        doc_id: str,
        id_range: Range | None = None,
        doc_range: Range | None = None,
        kind: CompletionItemKind = CompletionItemKind.FUNCTION,
        function_kind: FunctionKind = FunctionKind.USER_DEFINED,
        type_identifier: str = "",
    ) -> None:
        self.type_identifier = type_identifier
        super().__init__(name, module, doc_id, id_range, doc_range, kind)
        self.function_kind = function_kind
        self.return_type = return_type
        self.argument_ids: list[str] = list(argument_ids)
        self.variables: dict[str, Variable] = {}

    @property
    def name(self) -> str:
        """The name, prefixed with ``Type.`` for methods."""
        if not self.type_identifier:
            return self._name
        return f"{self.type_identifier}.{self._name}"

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def kind(self) -> CompletionItemKind:
        """Methods report as methods, everything else as functions."""
        if self.function_kind == FunctionKind.METHOD:
            return CompletionItemKind.METHOD
        return CompletionItemKind.FUNCTION

    @kind.setter
    def kind(self, value: CompletionItemKind) -> None:
        self._kind = value

    def method_name(self) -> str:
        """Return the bare name, without any type prefix."""
        return self._name

    def full_name(self) -> str:
        """Return the name including the type prefix, if any."""
        return self.name

    def arguments(self) -> list[Variable]:
        """Return the signature's argument variables, in order."""
        return [self.variables[arg] for arg in self.argument_ids]

    def display_signature(self, include_name: bool) -> str:
        """Render the signature, e.g. ``fn void abc(int param)``.

        Without the name this gives ``fn void(int param)``. Macros use the
        ``macro`` keyword and show a trailing body parameter after ``;``.
        """
        keyword = "macro" if self.function_kind == FunctionKind.MACRO else "fn"
        name = " " + self.full_name() if include_name else ""
        return_type = str(self.return_type)
        if return_type:
            return_type = " " + return_type

        args = ""
        for arg_id in self.argument_ids:
            variable = self.variables[arg_id]
            if self.function_kind == FunctionKind.MACRO and variable.name.startswith("@"):
                body_params = str(variable.type)
                if body_params.startswith("fn void"):
                    body_params = body_params[len("fn void"):]
                if body_params == "()":
                    body_params = ""
                args += f"; {variable.name}{body_params}"
                continue

            comma = ", " if args else ""

            arg_name = variable.name
            if variable.id_range == Range() and arg_name.startswith("$arg#"):
                # Originally unnamed; '$arg#' cannot be written in source.
                arg_name = ""

            arg_default = ""
            if variable.arg.default is not None:
                arg_default = " = " + variable.arg.default

            var_arg = "..." if variable.arg.var_arg else ""

            arg_type = str(variable.type)
            if arg_type and arg_name:
                if var_arg:
                    var_arg += " "
                else:
                    arg_type += " "

            if var_arg and arg_type and arg_type.endswith("[]"):
                arg_type = arg_type[:-2]

            if var_arg and not arg_name and arg_type == "any*":
                # C-style variadic arguments: fn name(...)
                arg_type = ""

            args += f"{comma}{arg_type}{var_arg}{arg_name}{arg_default}"

        return f"{keyword}{return_type}{name}({args})"

    def add_variables(self, variables: Iterable[Variable]) -> None:
        """Declare several local variables."""
        for variable in variables:
            self.add_variable(variable)

    def add_variable(self, variable: Variable) -> None:
        """Declare a local variable."""
        self.variables[variable.name] = variable
        self.insert(variable)

    def hover_info(self) -> str:
        return self.display_signature(True)

    def completion_detail(self) -> str:
        return self.display_signature(False)


def new_function(
    name: str,
    return_type: Type,
    argument_ids: Iterable[str],
    module: str,
    doc_id: str,
    id_range: Range,
    doc_range: Range,
) -> Function:
    """Create a plain function."""
    return Function(name, return_type, argument_ids, module, doc_id, id_range, doc_range)


def new_type_function(
    type_identifier: str,
    name: str,
    return_type: Type,
    argument_ids: Iterable[str],
    module: str,
    doc_id: str,
    id_range: Range,
    doc_range: Range,
    kind: CompletionItemKind,
) -> Function:
    """Create a method of ``type_identifier``."""
    return Function(
        name,
        return_type,
        argument_ids,
        module,
        doc_id,
        id_range,
        doc_range,
        kind,
        FunctionKind.METHOD,
        type_identifier,
    )


def new_type_macro(
    type_identifier: str,
    name: str,
    argument_ids: Iterable[str],
    return_type: Type | None,
    module: str,
    doc_id: str,
    id_range: Range,
    doc_range: Range,
    kind: CompletionItemKind,
) -> Function:
    """Create a macro bound to ``type_identifier``; no return type means an empty one."""
    if return_type is None:
        return_type = type_from_string("", module)
    return Function(
        name,
        return_type,
        argument_ids,
        module,
        doc_id,
        id_range,
        doc_range,
        kind,
        FunctionKind.MACRO,
        type_identifier,
    )


def new_macro(
    name: str,
    argument_ids: Iterable[str],
    return_type: Type | None,
    module: str,
    doc_id: str,
    id_range: Range,
    doc_range: Range,
) -> Function:
    """Create a free macro; no return type means an empty one."""
    if return_type is None:
        return_type = type_from_string("", module)
    return Function(
        name,
        return_type,
        argument_ids,
        module,
        doc_id,
        id_range,
        doc_range,
        CompletionItemKind.FUNCTION,
        FunctionKind.MACRO,
    )


class FunctionBuilder(IndexableBuilder[Function]):
    """Fluent construction of a :class:`Function`."""

    def __init__(self, name: str, return_type: Type, module: str, doc_id: str) -> None:
        super().__init__(Function(name, return_type, [], module, doc_id))

    def macro(self) -> FunctionBuilder:
        """Make the function a macro."""
        self._symbol.function_kind = FunctionKind.MACRO
        return self

    def with_type_identifier(self, type_identifier: str) -> FunctionBuilder:
        self._symbol.type_identifier = type_identifier
        return self

    def with_argument(self, variable: Variable) -> FunctionBuilder:
        """Append an argument to the signature."""
        self._symbol.argument_ids.append(variable.name)
        self._symbol.add_variable(variable)
        return self

    def with_docs(self, docs: DocComment) -> FunctionBuilder:  # type: ignore[override]
        """Attach a full doc comment, contracts included."""
        self._symbol.doc_comment = docs
        return self
"""Variables, constants and function arguments."""

from __future__ import annotations

from dataclasses import dataclass

from c3symbols.geometry import Range
from c3symbols.indexable import CompletionItemKind, Indexable, IndexableBuilder
from c3symbols.typeref import Type


@dataclass
class ArgInfo:
    """Extra facts about a variable that comes from a function argument."""

    var_arg: bool = False
    default: str | None = None


class Variable(Indexable):
    """A variable or constant with its declared type."""

    def __init__(
        self,
        name: str,
        variable_type: Type,
        module: str,
        doc_id: str,
        id_range: Range | None = None,
        doc_range: Range | None = None,
        kind: CompletionItemKind = CompletionItemKind.VARIABLE,
    ) -> None:
        super().__init__(name, module, doc_id, id_range, doc_range, kind)
        self.type = variable_type
        self.arg = ArgInfo()

    def is_constant(self) -> bool:
        """Tell whether this is a constant rather than a variable."""
        return self.kind == CompletionItemKind.CONSTANT

    def hover_info(self) -> str:
        return f"{self.type} {self.name}"

    def completion_detail(self) -> str:
        return str(self.type)


def new_constant(
    name: str,
    variable_type: Type,
    module: str,
    doc_id: str,
    id_range: Range,
    doc_range: Range,
) -> Variable:
    """Create a constant."""
    return Variable(
        name,
        variable_type,
        module,
        doc_id,
        id_range,
        doc_range,
        CompletionItemKind.CONSTANT,
    )


class VariableBuilder(IndexableBuilder[Variable]):
    """Fluent construction of a :class:`Variable`.

    Built variables start out without source code until ranges say otherwise.
    """

    def __init__(self, name: str, variable_type: Type, module: str, doc_id: str) -> None:
        variable = Variable(name, variable_type, module, doc_id)
        variable.has_source_code = False
        super().__init__(variable)

    def var_arg(self) -> VariableBuilder:
        """Mark the variable as coming from a ``...`` argument."""
        self._symbol.arg.var_arg = True
        return self

    def with_arg_default(self, value: str) -> VariableBuilder:
        """Give the argument a default value."""
        self._symbol.arg.default = value
        return self
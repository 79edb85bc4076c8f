"""Faults and their constants."""

from __future__ import annotations

from collections.abc import Iterable

from c3symbols.geometry import Range
from c3symbols.indexable import CompletionItemKind, Indexable, IndexableBuilder


class FaultConstant(Indexable):
    """One constant declared by a fault."""

    def __init__(
        self,
        name: str,
        fault_name: str,
        module: str,
        doc_id: str,
        id_range: Range | None = None,
        doc_range: Range | None = None,
    ) -> None:
        super().__init__(
            name, module, doc_id, id_range, doc_range, CompletionItemKind.ENUM_MEMBER
        )
        self.fault_name = fault_name

    def fault_fqn(self) -> str:
        """Return the qualified name of the fault this constant belongs to."""
        return f"{self.module.name}::{self.fault_name}"

    def hover_info(self) -> str:
        return self.name

    def completion_detail(self) -> str:
        return "Fault Constant"


class Fault(Indexable):
    """A fault type and its constants."""

    def __init__(
        self,
        name: str,
        base_type: str,
        constants: Iterable[FaultConstant],
        module: str,
        doc_id: str,
        id_range: Range | None = None,
        doc_range: Range | None = None,
    ) -> None:
        super().__init__(name, module, doc_id, id_range, doc_range, CompletionItemKind.ENUM)
        self.base_type = base_type
        self.constants: list[FaultConstant] = []
        self.add_constants(constants)

    def register_constant(self, name: str, value: str, pos_range: Range) -> None:
        """Add a new constant declared at ``pos_range``.

        ``value`` is accepted for symmetry with enums; fault constants carry
        no value.
        """
        constant = FaultConstant(
            name, self.name, self.module_string, self.document_uri, pos_range, pos_range
        )
        constant.has_source_code = False
        self.constants.append(constant)
        self.insert(constant)

    def add_constants(self, constants: Iterable[FaultConstant]) -> None:
        """Set the constants and add each of them as a child."""
        self.constants = list(constants)
        for constant in self.constants:
            self.insert(constant)

    def has_constant(self, identifier: str) -> bool:
        """Tell whether a constant of that name exists."""
        return any(c.name == identifier for c in self.constants)

    def get_constant(self, identifier: str) -> FaultConstant:
        """Return the constant of that name; raise ``KeyError`` if absent."""
        for constant in self.constants:
            if constant.name == identifier:
                return constant
        raise KeyError(f"{identifier} enumerator not found")

    def hover_info(self) -> str:
        return self.name

    def completion_detail(self) -> str:
        return "Fault"


class FaultBuilder(IndexableBuilder[Fault]):
    """Fluent construction of a :class:`Fault`.

    Built faults start out without source code.
    """

    def __init__(self, name: str, base_type: str, module: str, doc_id: str) -> None:
        fault = Fault(name, base_type, [], module, doc_id)
        fault.has_source_code = False
        super().__init__(fault)

    def with_constant(self, constant: FaultConstant) -> FaultBuilder:
        self._symbol.constants.append(constant)
        return self


class FaultConstantBuilder(IndexableBuilder[FaultConstant]):
    """Fluent construction of a :class:`FaultConstant`.

    Built constants start out without source code.
    """

    def __init__(self, name: str, module: str, doc_id: str) -> None:
        constant = FaultConstant(name, "", module, doc_id)
        constant.has_source_code = False
        super().__init__(constant)

    def with_fault_name(self, fault_name: str) -> FaultConstantBuilder:
        self._symbol.fault_name = fault_name
        return self
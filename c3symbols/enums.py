"""Enums and their enumerators."""

from __future__ import annotations

from collections.abc import Iterable

from c3symbols.geometry import Range
from c3symbols.indexable import CompletionItemKind, Indexable, IndexableBuilder
from c3symbols.variable import Variable


class Enumerator(Indexable):
    """One value of an enum, with its associated values."""

    def __init__(
        self,
        name: str,
        value: str,
        associated_values: Iterable[Variable],
        enum_name: str,
        module: str,
        id_range: Range | None,
        doc_id: str,
    ) -> None:
        super().__init__(
            name, module, doc_id, id_range, Range(), CompletionItemKind.ENUM_MEMBER
        )
        self.value = value
        self.associated_values: list[Variable] = list(associated_values)
        self.enum_name = enum_name
        for associated in self.associated_values:
            self.insert_nested_scope(associated)

    def enum_fqn(self) -> str:
        """Return the qualified name of the enum this value belongs to."""
        return f"{self.module.name}::{self.enum_name}"

    def hover_info(self) -> str:
        return f"{self.name}: {self.value}"

    def completion_detail(self) -> str:
        return "Enum Value"


class Enum(Indexable):
    """An enum type and its enumerators."""

    def __init__(
        self,
        name: str,
        base_type: str,
        enumerators: Iterable[Enumerator],
        module: str,
        doc_id: str,
        id_range: Range | None = None,
        doc_range: Range | None = None,
    ) -> None:
        super().__init__(name, module, doc_id, id_range, doc_range, CompletionItemKind.ENUM)
        self.base_type = base_type
        self.enumerators: list[Enumerator] = list(enumerators)

    def register_enumerator(self, name: str, value: str, pos_range: Range) -> None:
        """Add a new enumerator without associated values."""
        enumerator = Enumerator(name, value, [], self.name, "", pos_range, self.document_uri)
        self.enumerators.append(enumerator)
        self.insert(enumerator)

    def add_enumerators(self, enumerators: Iterable[Enumerator]) -> None:
        """Replace the enumerators, and the children, with ``enumerators``."""
        self.enumerators = list(enumerators)
        self.children = []
        self.children_names = []
        for enumerator in self.enumerators:
            self.insert(enumerator)

    def has_enumerator(self, identifier: str) -> bool:
        """Tell whether an enumerator of that name exists."""
        return any(e.name == identifier for e in self.enumerators)

    def associated_values(self) -> list[Variable]:
        """Return the associated values declared for the enum's values."""
        if self.enumerators:
            return self.enumerators[0].associated_values
        return []

    def get_enumerator(self, identifier: str) -> Enumerator:
        """Return the enumerator of that name; raise ``KeyError`` if absent."""
        for enumerator in self.enumerators:
            if enumerator.name == identifier:
                return enumerator
        raise KeyError(f"{identifier} enumerator not found")

    def hover_info(self) -> str:
        return self.name

    def completion_detail(self) -> str:
        return "Enum"


class EnumBuilder(IndexableBuilder[Enum]):
    """Fluent construction of an :class:`Enum`."""

    def __init__(self, name: str, base_type: str, module: str, doc_id: str) -> None:
        super().__init__(Enum(name, base_type, [], module, doc_id))

    def with_enumerator(self, enumerator: Enumerator) -> EnumBuilder:
        self._symbol.enumerators.append(enumerator)
        return self


class EnumeratorBuilder(IndexableBuilder[Enumerator]):
    """Fluent construction of an :class:`Enumerator`."""

    def __init__(self, name: str, doc_id: str) -> None:
        super().__init__(Enumerator(name, "", [], "", "", Range(), doc_id))

    def with_associative_values(self, values: Iterable[Variable]) -> EnumeratorBuilder:
        self._symbol.associated_values = list(values)
        return self

    def with_enum_name(self, name: str) -> EnumeratorBuilder:
        self._symbol.enum_name = name
        return self
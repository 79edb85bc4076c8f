"""Type aliases: ``def`` and ``distinct`` declarations."""

from __future__ import annotations

from c3symbols.geometry import Range
from c3symbols.indexable import CompletionItemKind, Indexable, IndexableBuilder
from c3symbols.typeref import Type


class Def(Indexable):
    """A ``def`` alias, resolving either to an identifier or to a type."""

    def __init__(
        self,
        name: str,
        resolves_to: str,
        module: str,
        doc_id: str,
        id_range: Range | None = None,
        doc_range: Range | None = None,
    ) -> None:
        super().__init__(
            name, module, doc_id, id_range, doc_range, CompletionItemKind.TYPE_PARAMETER
        )
        self.resolves_to = resolves_to
        self.resolved_type: Type | None = None

    def resolves_to_type(self) -> bool:
        """Tell whether the alias names a type rather than an identifier."""
        return self.resolved_type is not None

    def hover_info(self) -> str:
        if self.resolved_type is None:
            return f"def {self.name} = {self.resolves_to}"
        return f"def {self.name} = {self.resolved_type.display_with_generics()}"

    def completion_detail(self) -> str:
        if self.resolved_type is not None:
            return "Type"
        if self.name.startswith("@"):
            return f"Alias for macro '{self.resolves_to}'"
        return f"Alias for '{self.resolves_to}'"


def new_def_type(
    name: str,
    resolves_to: Type,
    module: str,
    doc_id: str,
    id_range: Range,
    doc_range: Range,
) -> Def:
    """Create a ``def`` that aliases a type."""
    definition = Def(name, "", module, doc_id, id_range, doc_range)
    definition.resolved_type = resolves_to
    return definition


class DefBuilder(IndexableBuilder[Def]):
    """Fluent construction of a :class:`Def`."""

    def __init__(self, name: str, module: str, doc_id: str) -> None:
        super().__init__(Def(name, "", module, doc_id))

    def with_name(self, name: str) -> DefBuilder:
        self._symbol.name = name
        return self

    def with_resolves_to(self, resolves_to: str) -> DefBuilder:
        self._symbol.resolves_to = resolves_to
        return self

    def with_resolves_to_type(self, resolves_to: Type) -> DefBuilder:
        self._symbol.resolved_type = resolves_to
        return self


class Distinct(Indexable):
    """A ``distinct`` type built over a base type, possibly inline."""

    def __init__(
        self,
        name: str,
        base_type: Type | None,
        inline: bool,
        module: str,
        doc_id: str,
        id_range: Range | None = None,
        doc_range: Range | None = None,
    ) -> None:
        super().__init__(
            name, module, doc_id, id_range, doc_range, CompletionItemKind.TYPE_PARAMETER
        )
        self.base_type = base_type
        self.inline = inline

    def hover_info(self) -> str:
        if self.base_type is None:
            raise ValueError(f"distinct {self.name} has no base type")
        inline = "inline " if self.inline else ""
        return f"distinct {self.name} = {inline}{self.base_type.display_with_generics()}"

    def completion_detail(self) -> str:
        return "Type"


class DistinctBuilder(IndexableBuilder[Distinct]):
    """Fluent construction of a :class:`Distinct`."""

    def __init__(self, name: str, module: str, doc_id: str) -> None:
        super().__init__(Distinct(name, None, False, module, doc_id))

    def with_name(self, name: str) -> DistinctBuilder:
        self._symbol.name = name
        return self

    def with_base_type(self, base_type: Type) -> DistinctBuilder:
        self._symbol.base_type = base_type
        return self

    def with_inline(self, inline: bool) -> DistinctBuilder:
        self._symbol.inline = inline
        return self
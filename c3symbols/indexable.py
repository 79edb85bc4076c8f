"""The common base of every indexed symbol."""

from __future__ import annotations

from enum import IntEnum
from typing import Generic, TypeVar

from c3symbols.doc_comment import DocComment
from c3symbols.geometry import Range, make_range
from c3symbols.module_path import ModulePath


class CompletionItemKind(IntEnum):
    """Completion item kinds as numbered by the language server protocol."""

    TEXT = 1
    METHOD = 2
    FUNCTION = 3
    CONSTRUCTOR = 4
    FIELD = 5
    VARIABLE = 6
    CLASS = 7
    INTERFACE = 8
    MODULE = 9
    PROPERTY = 10
    UNIT = 11
    VALUE = 12
    ENUM = 13
    KEYWORD = 14
    SNIPPET = 15
    COLOR = 16
    FILE = 17
    REFERENCE = 18
    FOLDER = 19
    ENUM_MEMBER = 20
    CONSTANT = 21
    STRUCT = 22
    EVENT = 23
    OPERATOR = 24
    TYPE_PARAMETER = 25


class SymbolType(IntEnum):
    """Broad categories of symbols."""

    MODULE = 0
    FUNCTION = 1
    VARIABLE = 2
    ENUM = 3
    ENUMERATOR = 4
    FAULT = 5
    FAULT_CONSTANT = 6
    STRUCT = 7
    STRUCT_MEMBER = 8
    BITSTRUCT = 9


class Indexable:
    """A named symbol declared in some module of some document.

    A symbol keeps the symbols declared inside it as children and the
    scopes opened inside it (such as function bodies) as nested scopes.
    """

    def __init__(
        self,
        name: str,
        module: str,
        doc_id: str,
        id_range: Range | None = None,
        doc_range: Range | None = None,
        kind: CompletionItemKind = CompletionItemKind.TEXT,
    ) -> None:
        self._name = name
        self.module_string = module
        self.module = ModulePath.from_string(module)
        self.document_uri = doc_id
        self.id_range = id_range if id_range is not None else Range()
        self.doc_range = doc_range if doc_range is not None else Range()
        self.kind = kind
        self.has_source_code = True
        self.doc_comment: DocComment | None = None
        self.attributes: list[str] = []
        self.children: list[Indexable] = []
        self.children_names: list[str] = []
        self.nested_scopes: list[Indexable] = []

    @property
    def name(self) -> str:
        """The symbol's name."""
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    def fqn(self) -> str:
        """Return the fully qualified name, ``module::name``."""
        return f"{self.module.name}::{self.name}"

    def is_submodule_of(self, module: ModulePath) -> bool:
        """Tell whether this symbol's module lies within ``module``.

        The empty module path contains nothing.
        """
        if module.is_empty():
            return False
        return self.module.is_submodule_of(module)

    def is_private(self) -> bool:
        """Tell whether the symbol carries the ``@private`` attribute."""
        return "@private" in self.attributes

    def insert(self, child: Indexable) -> None:
        """Add a child symbol."""
        self.children.append(child)
        self.children_names.append(child.name)

    def insert_nested_scope(self, symbol: Indexable) -> None:
        """Add a symbol that opens a scope nested in this one."""
        self.nested_scopes.append(symbol)

    def hover_info(self) -> str:
        """Text shown when hovering the symbol."""
        return self.name

    def completion_detail(self) -> str:
        """Short detail shown next to the symbol in completion lists."""
        return ""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.fqn()!r})"


S = TypeVar("S", bound=Indexable)


class IndexableBuilder(Generic[S]):
    """Fluent adjustment of a symbol's common properties."""

    def __init__(self, symbol: S) -> None:
        self._symbol = symbol

    def without_source_code(self) -> IndexableBuilder[S]:
        """Mark the symbol as having no reachable source code."""
        self._symbol.has_source_code = False
        return self

    def with_identifier_range(
        self, line_start: int, char_start: int, line_end: int, char_end: int
    ) -> IndexableBuilder[S]:
        self._symbol.id_range = make_range(line_start, char_start, line_end, char_end)
        return self

    def with_document_range(
        self, line_start: int, char_start: int, line_end: int, char_end: int
    ) -> IndexableBuilder[S]:
        self._symbol.doc_range = make_range(line_start, char_start, line_end, char_end)
        return self

    def with_docs(self, docs: str) -> IndexableBuilder[S]:
        """Attach a doc comment made of ``docs`` alone, without contracts."""
        self._symbol.doc_comment = DocComment(docs)
        return self

    def build(self) -> S:
        """Return the symbol built so far."""
        return self._symbol
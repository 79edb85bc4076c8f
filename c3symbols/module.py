"""Modules, interfaces and module generic parameters."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from c3symbols.aliases import Def, Distinct
from c3symbols.doc_comment import DocComment
from c3symbols.enums import Enum
from c3symbols.faults import Fault
from c3symbols.function import Function
from c3symbols.geometry import Range
from c3symbols.indexable import CompletionItemKind, Indexable, IndexableBuilder
from c3symbols.module_path import ModulePath
from c3symbols.structs import Bitstruct, Struct
from c3symbols.variable import Variable


class GenericParameter(Indexable):
    """A generic parameter declared by a module, such as ``Type`` in ``module list(<Type>)``."""

    def __init__(
        self,
        name: str,
        module: str,
        doc_id: str,
        id_range: Range | None = None,
        doc_range: Range | None = None,
    ) -> None:
        super().__init__(
            name, module, doc_id, id_range, doc_range, CompletionItemKind.TYPE_PARAMETER
        )

    def hover_info(self) -> str:
        return self.name

    def completion_detail(self) -> str:
        return "Type Parameter"


class Interface(Indexable):
    """An interface and the methods it declares."""

    def __init__(
        self,
        name: str,
        module: str,
        doc_id: str,
        id_range: Range | None = None,
        doc_range: Range | None = None,
    ) -> None:
        super().__init__(
            name, module, doc_id, id_range, doc_range, CompletionItemKind.INTERFACE
        )
        self.methods: dict[str, Function] = {}

    def get_method(self, name: str) -> Function | None:
        """Return the method of that name, or ``None``."""
        return self.methods.get(name)

    def add_methods(self, methods: Iterable[Function]) -> None:
        """Declare methods of the interface."""
        for method in methods:
            self.methods[method.name] = method
            self.insert(method)

    def hover_info(self) -> str:
        return self.name

    def completion_detail(self) -> str:
        return "Interface"


class InterfaceBuilder(IndexableBuilder[Interface]):
    """Fluent construction of an :class:`Interface`.

    The document range starts out covering the first 1000 characters of line 0.
    """

    def __init__(self, name: str, module: str, doc_id: str) -> None:
        super().__init__(Interface(name, module, doc_id))
        self.with_document_range(0, 0, 0, 1000)


class Module(Indexable):
    """A module scope in a document, with everything declared in it."""

    def __init__(
        self,
        name: str,
        doc_id: str,
        id_range: Range | None = None,
        doc_range: Range | None = None,
    ) -> None:
        super().__init__(name, name, doc_id, id_range, doc_range, CompletionItemKind.MODULE)
        self.variables: dict[str, Variable] = {}
        self.enums: dict[str, Enum] = {}
        self.faults: dict[str, Fault] = {}
        self.structs: dict[str, Struct] = {}
        self.bitstructs: dict[str, Bitstruct] = {}
        self.defs: dict[str, Def] = {}
        self.distincts: dict[str, Distinct] = {}
        self.children_functions: list[Function] = []
        self.interfaces: dict[str, Interface] = {}
        self.imports: list[str] = []
        self.generic_parameters: dict[str, GenericParameter] = {}

    def add_variable(self, variable: Variable) -> Module:
        self.variables[variable.name] = variable
        self.insert(variable)
        return self

    def add_variables(self, variables: Iterable[Variable]) -> None:
        for variable in variables:
            self.add_variable(variable)

    def add_enum(self, enum: Enum) -> Module:
        self.enums[enum.name] = enum
        self.insert(enum)
        return self

    def add_fault(self, fault: Fault) -> Module:
        self.faults[fault.name] = fault
        self.insert(fault)
        return self

    def add_function(self, function: Function) -> Module:
        """Add a function; it opens a nested scope rather than becoming a child."""
        self.children_functions.append(function)
        self.insert_nested_scope(function)
        return self

    def add_interface(self, interface: Interface) -> Module:
        self.interfaces[interface.name] = interface
        self.insert(interface)
        return self

    def add_struct(self, strukt: Struct) -> Module:
        self.structs[strukt.name] = strukt
        self.insert(strukt)
        return self

    def add_bitstruct(self, bitstruct: Bitstruct) -> Module:
        self.bitstructs[bitstruct.name] = bitstruct
        self.insert(bitstruct)
        return self

    def add_def(self, definition: Def) -> Module:
        self.defs[definition.name] = definition
        self.insert(definition)
        return self

    def add_distinct(self, distinct: Distinct) -> Module:
        self.distincts[distinct.name] = distinct
        self.insert(distinct)
        return self

    def add_imports(self, imports: Iterable[str]) -> None:
        """Record modules imported into this scope."""
        self.imports.extend(imports)

    def change_module(self, module: str) -> None:
        """Rename the module and its path."""
        self.name = module
        self.module = ModulePath.from_string(module)

    def set_generic_parameters(
        self, generics: Mapping[str, GenericParameter]
    ) -> Module:
        """Set the module's generic parameters and add each as a child."""
        self.generic_parameters = dict(generics)
        for generic in self.generic_parameters.values():
            self.insert(generic)
        return self

    def find_function(self, name: str) -> Function | None:
        """Return the function whose full name is ``name``, or ``None``."""
        return next((f for f in self.children_functions if f.full_name() == name), None)

    def hover_info(self) -> str:
        return self.name

    def completion_detail(self) -> str:
        return "Module"


class ModuleBuilder(IndexableBuilder[Module]):
    """Fluent construction of a :class:`Module`."""

    def __init__(self, module_name: str, doc_id: str) -> None:
        super().__init__(Module(module_name, doc_id, Range(), Range()))

    def without_source_code(self) -> ModuleBuilder:
        self._symbol.has_source_code = False
        return self

    def with_docs(self, doc_comment: DocComment) -> ModuleBuilder:  # type: ignore[override]
        """Attach a full doc comment, contracts included."""
        self._symbol.doc_comment = doc_comment
        return self

    def build(self) -> Module:
        return self._symbol
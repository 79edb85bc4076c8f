"""The project-wide table of parsed documents and their modules."""

from __future__ import annotations

from c3symbols.module_path import ModulePath
from c3symbols.pending import PendingToResolve, PendingTypeContext
from c3symbols.typeref import Type
from c3symbols.unit_modules import UnitModules


class SymbolsTable:
    """Parsed modules by document, plus the types still waiting to be resolved."""

    def __init__(self) -> None:
        self._documents: dict[str, UnitModules] = {}
        self.pending_to_resolve = PendingToResolve()

    def register(self, unit_modules: UnitModules, pending: PendingToResolve) -> None:
        """Store a document's modules, merge its pending work and resolve what can be."""
        self._documents[unit_modules.doc_id] = unit_modules

        for module_name, types in pending.types_by_module.items():
            self.pending_to_resolve.types_by_module.setdefault(module_name, []).extend(
                types
            )
        self.pending_to_resolve.subtyping_to_resolve.extend(
            pending.subtyping_to_resolve
        )

        self._resolve_types()

    def delete_document(self, doc_id: str) -> None:
        """Forget a document; unknown documents are ignored."""
        self._documents.pop(doc_id, None)

    def rename_document(self, old_doc_id: str, new_doc_id: str) -> None:
        """Move a document's modules to a new document id, if it is known."""
        if old_doc_id in self._documents:
            self._documents[new_doc_id] = self._documents.pop(old_doc_id)

    def get_by_doc(self, doc_id: str) -> UnitModules | None:
        """Return the modules of a document, or ``None`` if it is unknown."""
        return self._documents.get(doc_id)

    def all(self) -> dict[str, UnitModules]:
        """Return every document's modules, keyed by document id."""
        return self._documents

    def _resolve_types(self) -> None:
        for contexts in self.pending_to_resolve.types_by_module.values():
            for context in reversed(contexts):
                if not context.solved:
                    self._try_to_solve_type(context)
        self._expand_struct_subtypes()

    def _try_to_solve_type(self, context: PendingTypeContext) -> None:
        imports = context.context_module.imports
        if not imports:
            self._solve_from_modules(context)
            return

        for imported in imports:
            path = ModulePath.from_string(imported)
            for unit in list(self._documents.values()):
                if unit.has_explicitly_imported_modules(path):
                    self._solve_from_modules(context)

    def _solve_from_modules(self, context: PendingTypeContext) -> None:
        module_name = self._find_type_in_modules(context.type)
        if module_name is not None:
            context.type.module = module_name
            context.solve()

    def _find_type_in_modules(self, vtype: Type) -> str | None:
        for unit in self._documents.values():
            for module_id in unit.module_ids():
                module = unit.get(module_id)
                if module is not None and vtype.name in module.children_names:
                    return module.name
        return None

    def _expand_struct_subtypes(self) -> None:
        pending = self.pending_to_resolve.subtyping_to_resolve
        if not pending:
            return

        for with_subtyping in pending:
            for inlined in with_subtyping.members:
                for unit in self._documents.values():
                    for module in unit.modules():
                        for strukt in list(module.structs.values()):
                            if strukt.name == inlined.name:
                                with_subtyping.strukt.inherit_members_from(
                                    inlined.name, strukt
                                )

        self.pending_to_resolve.subtyping_to_resolve = []
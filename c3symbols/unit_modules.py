"""The modules declared in one document."""

from __future__ import annotations

from collections.abc import Iterator

from c3symbols.geometry import Position, Range, make_range
from c3symbols.module import Module
from c3symbols.module_path import ModulePath, normalize_module_name


class UnitModules:
    """The modules parsed from a single document, in declaration order."""

    def __init__(self, doc_id: str) -> None:
        self.doc_id = doc_id
        self._modules: dict[str, Module] = {}

    def __iter__(self) -> Iterator[Module]:
        return iter(list(self._modules.values()))

    def __len__(self) -> int:
        return len(self._modules)

    def module_ids(self) -> list[str]:
        """Return the keys the modules are stored under, in order."""
        return list(self._modules)

    def set_module(self, name: str, module: Module) -> None:
        """Store ``module`` under ``name``, replacing any module stored there."""
        self._modules[name] = module

    def get_or_init_module(
        self, module_name: str, doc_range: Range, anonymous: bool
    ) -> Module:
        """Return the module called ``module_name``, creating it if needed.

        An anonymous module takes its name from the document name instead.
        A new module spans ``doc_range`` for both its ranges.
        """
        if anonymous:
            module_name = normalize_module_name(self.doc_id)

        module = self._modules.get(module_name)
        if module is None:
            module = Module(module_name, self.doc_id, doc_range, doc_range)
            self._modules[module_name] = module
        return module

    def update_or_init_module(self, module: Module) -> Module:
        """Store ``module``, or copy its attributes and generics onto the stored one.

        Returns the module that was passed in.
        """
        existing = self._modules.get(module.name)
        if existing is None:
            self._modules[module.name] = module
        else:
            existing.attributes = module.attributes
            existing.set_generic_parameters(module.generic_parameters)
        return module

    def register_module(self, module: Module) -> None:
        """Store ``module`` under its module path."""
        self._modules[module.module.name] = module

    def get(self, module_name: str) -> Module | None:
        """Return the module stored under ``module_name``, or ``None``."""
        return self._modules.get(module_name)

    def loadable_modules(self, module_path: ModulePath) -> list[Module]:
        """Return the modules implicitly imported into ``module_path``."""
        return [
            module
            for module in self._modules.values()
            if module.module.is_implicitly_imported(module_path)
        ]

    def has_implicit_loadable_modules(self, module_path: ModulePath) -> bool:
        """Tell whether any module is implicitly imported into ``module_path``."""
        return any(
            module.module.is_implicitly_imported(module_path)
            for module in self._modules.values()
        )

    def has_explicitly_imported_modules(self, module_path: ModulePath) -> bool:
        """Tell whether importing ``module_path`` reaches a module stored here."""
        return any(
            module_path.is_submodule_of(module.module)
            for module in self._modules.values()
        )

    def modules(self) -> list[Module]:
        """Return the modules, in the order they were stored."""
        return list(self._modules.values())

    def find_context_module_in_cursor_position(self, position: Position) -> str:
        """Return the name of the module the cursor at ``position`` is in.

        Returns the empty string when no module can be found.
        """
        closer_previous_range = make_range(0, 0, 0, 0)
        prior_module = ""
        for module in self._modules.values():
            if module.doc_range.has_position(position):
                return module.module.name

            if module.doc_range.is_before_position(position):
                if closer_previous_range.is_after(module.doc_range):
                    closer_previous_range = module.doc_range
                    prior_module = module.name

        if prior_module:
            found = self._modules.get(prior_module)
            if found is not None:
                return found.module.name
        return ""
"""Symbols whose types could not be resolved on the first pass."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from c3symbols.aliases import Def, Distinct
from c3symbols.function import Function
from c3symbols.module import Module
from c3symbols.structs import Struct
from c3symbols.typeref import Type
from c3symbols.variable import Variable


@dataclass(eq=False)
class PendingTypeContext:
    """A type reference waiting to be resolved, and the module it appears in."""

    type: Type
    context_module: Module
    solved: bool = False

    def solve(self) -> None:
        """Mark the type as resolved."""
        self.solved = True


@dataclass(eq=False)
class StructWithSubtyping:
    """A struct together with the types of its inline members to expand."""

    strukt: Struct
    members: list[Type] = field(default_factory=list)


class PendingToResolve:
    """What needs a second pass once more modules have been parsed."""

    def __init__(self) -> None:
        self.types_by_module: dict[str, list[PendingTypeContext]] = {}
        self.subtyping_to_resolve: list[StructWithSubtyping] = []

    def types_for_module(self, module_name: str) -> list[PendingTypeContext]:
        """Return the pending types registered under ``module_name``."""
        return self.types_by_module.get(module_name, [])

    def _add(self, module_name: str, vtype: Type, context_module: Module) -> None:
        self.types_by_module.setdefault(module_name, []).append(
            PendingTypeContext(vtype, context_module)
        )

    def add_struct_subtype(self, strukt: Struct, types: Iterable[Type]) -> None:
        """Register inline member types of ``strukt`` to expand."""
        self.subtyping_to_resolve.append(StructWithSubtyping(strukt, list(types)))

    def add_struct_inline_members(self, strukt: Struct) -> None:
        """Register the struct's inline members that are not yet expanded."""
        inline = [
            member.type
            for member in strukt.members
            if member.inline_pending_resolve and not member.expanded_inline
        ]
        if inline:
            self.subtyping_to_resolve.append(StructWithSubtyping(strukt, inline))

    def solve_type(self, module_name: str, index: int) -> None:
        """Drop the pending type at ``index`` of ``module_name``.

        Raises ``KeyError`` or ``IndexError`` when there is no such entry.
        """
        del self.types_by_module[module_name][index]

    def add_variable_types(
        self, variables: Iterable[Variable], context_module: Module
    ) -> None:
        """Register the non-builtin types of ``variables`` under their own module."""
        for variable in variables:
            if not variable.type.base_type_language:
                self._add(variable.module_string, variable.type, context_module)

    def add_struct_member_types(self, strukt: Struct, context_module: Module) -> None:
        """Register the non-builtin types of the struct's members."""
        for member in strukt.members:
            if not member.type.base_type_language:
                self._add(context_module.name, member.type, context_module)

    def add_function_types(self, function: Function, context_module: Module) -> None:
        """Register the non-builtin return and argument types of ``function``."""
        if not function.return_type.base_type_language:
            self._add(context_module.name, function.return_type, context_module)
        for argument in function.arguments():
            if not argument.type.base_type_language:
                self._add(context_module.name, argument.type, context_module)

    def add_def_type(self, definition: Def, context_module: Module) -> None:
        """Register the aliased type of ``definition``, if it is a non-builtin type."""
        resolved = definition.resolved_type
        if resolved is None or resolved.base_type_language:
            return
        self._add(context_module.name, resolved, context_module)

    def add_distinct_type(self, distinct: Distinct, context_module: Module) -> None:
        """Register the base type of ``distinct``, if it is not builtin."""
        base_type = distinct.base_type
        if base_type is None:
            raise ValueError(f"distinct {distinct.name} has no base type")
        if not base_type.base_type_language:
            self._add(context_module.name, base_type, context_module)
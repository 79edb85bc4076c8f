"""Structs, unions, bitstructs and their members."""

from __future__ import annotations

from collections.abc import Iterable

from c3symbols.geometry import Range
from c3symbols.indexable import CompletionItemKind, Indexable, IndexableBuilder
from c3symbols.typeref import Type


class StructMember(Indexable):
    """A member of a struct, union or bitstruct.

    ``bit_range`` holds the bit positions for bitstruct members. A member
    that is an anonymous nested struct has ``is_struct`` set and the nested
    struct in ``substruct``.
    """

    def __init__(
        self,
        name: str,
        field_type: Type,
        bit_range: tuple[int, int] | None,
        module: str,
        doc_id: str,
        id_range: Range | None = None,
    ) -> None:
        super().__init__(name, module, doc_id, id_range, Range(), CompletionItemKind.FIELD)
        self.type = field_type
        self.bit_range = bit_range
        self.inline_pending_resolve = False
        self.expanded_inline = False
        self.is_struct = False
        self.substruct: Struct | None = None

    def hover_info(self) -> str:
        return f"{self.type} {self.name}"

    def completion_detail(self) -> str:
        if self.is_struct and self.substruct is not None:
            return f"Struct member '{self.substruct.name}'"
        return str(self.type)


def new_inline_subtype(
    name: str, field_type: Type, module: str, doc_id: str, id_range: Range
) -> StructMember:
    """Create an inline member whose own members are still to be merged in."""
    member = StructMember(name, field_type, None, module, doc_id, id_range)
    member.inline_pending_resolve = True
    return member


def new_substruct_member(
    name: str,
    members: Iterable[StructMember],
    module: str,
    doc_id: str,
    id_range: Range,
) -> StructMember:
    """Create a member that is an anonymous nested struct."""
    substruct = Struct(name, [], members, module, doc_id, id_range, Range())
    member = StructMember(name, Type(), None, module, doc_id, id_range)
    member.is_struct = True
    member.substruct = substruct
    member.insert(substruct)
    return member


class Struct(Indexable):
    """A struct or union with its members and implemented interfaces."""

    def __init__(
        self,
        name: str,
        interfaces: Iterable[str],
        members: Iterable[StructMember],
        module: str,
        doc_id: str,
        id_range: Range | None = None,
        doc_range: Range | None = None,
        is_union: bool = False,
    ) -> None:
        super().__init__(name, module, doc_id, id_range, doc_range, CompletionItemKind.STRUCT)
        self.members: list[StructMember] = list(members)
        self.implements: list[str] = list(interfaces)
        self.is_union = is_union
        for member in self.members:
            self.insert(member)

    def inherit_members_from(self, inlined_member_name: str, other: Struct) -> None:
        """Expand an inline member by appending the members of ``other``."""
        for member in self.members:
            if member.type.name == inlined_member_name:
                member.inline_pending_resolve = False
                member.expanded_inline = True
        self.members.extend(list(other.members))

    def hover_info(self) -> str:
        return self.name

    def completion_detail(self) -> str:
        return "Type"


def new_union(
    name: str,
    members: Iterable[StructMember],
    module: str,
    doc_id: str,
    id_range: Range,
    doc_range: Range,
) -> Struct:
    """Create a union."""
    return Struct(name, [], members, module, doc_id, id_range, doc_range, is_union=True)


class StructBuilder(IndexableBuilder[Struct]):
    """Fluent construction of a :class:`Struct`."""

    def __init__(self, name: str, module: str, doc_id: str) -> None:
        super().__init__(Struct(name, [], [], module, doc_id, Range(), Range()))

    def with_struct_member(
        self, name: str, base_type: Type, module: str, doc_id: str
    ) -> StructBuilder:
        self._symbol.members.append(
            StructMember(name, base_type, None, module, doc_id, Range())
        )
        return self

    def with_sub_struct_member(
        self, name: str, base_type: Type, module: str, doc_id: str
    ) -> StructBuilder:
        """Append an inline member still waiting to be expanded."""
        member = StructMember(name, base_type, None, module, doc_id, Range())
        member.inline_pending_resolve = True
        self._symbol.members.append(member)
        return self

    def implements_interface(self, interface_name: str) -> StructBuilder:
        self._symbol.implements.append(interface_name)
        return self


class Bitstruct(Indexable):
    """A bitstruct over a backing integer type."""

    def __init__(
        self,
        name: str,
        backing_type: Type,
        interfaces: Iterable[str],
        members: Iterable[StructMember],
        module: str,
        doc_id: str,
        id_range: Range | None = None,
        doc_range: Range | None = None,
    ) -> None:
        super().__init__(name, module, doc_id, id_range, doc_range, CompletionItemKind.STRUCT)
        self.backing_type = backing_type
        self.members: list[StructMember] = list(members)
        self.implements: list[str] = list(interfaces)
        for member in self.members:
            self.insert(member)

    def hover_info(self) -> str:
        return self.name

    def completion_detail(self) -> str:
        return "Type"


class BitstructBuilder(IndexableBuilder[Bitstruct]):
    """Fluent construction of a :class:`Bitstruct`."""

    def __init__(self, name: str, backing_type: Type, module: str, doc_id: str) -> None:
        super().__init__(
            Bitstruct(name, backing_type, [], [], module, doc_id, Range(), Range())
        )

    def with_struct_member(
        self, name: str, base_type: Type, module: str, doc_id: str
    ) -> BitstructBuilder:
        self._symbol.members.append(
            StructMember(name, base_type, None, module, doc_id, Range())
        )
        return self

    def implements_interface(self, interface_name: str) -> BitstructBuilder:
        self._symbol.implements.append(interface_name)
        return self
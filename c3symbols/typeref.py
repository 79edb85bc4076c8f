"""Type references as they appear in declarations."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field


@dataclass
class Type:
    """A reference to a type, with pointers, optionality and collections."""

    name: str = ""
    pointer: int = 0
    optional: bool = False
    generic_arguments: list[Type] = field(default_factory=list)
    module: str = ""
    base_type_language: bool = False
    is_generic_argument: bool = False
    is_collection: bool = False
    collection_size: int | None = None

    def full_qualified_name(self) -> str:
        """Return ``module::name``, or just the name for built-in types."""
        if self.base_type_language:
            return self.name
        return self.module + "::" + self.name

    def unsized_collection_of(self) -> Type:
        """Return a copy of this type turned into an unsized collection."""
        return dataclasses.replace(
            self,
            generic_arguments=list(self.generic_arguments),
            is_collection=True,
            collection_size=None,
        )

    def display_with_generics(self) -> str:
        """Return the type text followed by its generic arguments, if any."""
        text = str(self)
        if self.generic_arguments:
            text += "(<" + ", ".join(str(g) for g in self.generic_arguments) + ">)"
        return text

    def __str__(self) -> str:
        collection = ""
        if self.is_collection:
            size = "" if self.collection_size is None else str(self.collection_size)
            collection = f"[{size}]"
        optional = "!" if self.optional else ""
        return f"{self.name}{'*' * self.pointer}{collection}{optional}"


def type_from_string(text: str, module: str) -> Type:
    """Build a type from its written form, counting a trailing pointer star."""
    base = text[:-1] if text.endswith("*") else text
    return Type(name=base, pointer=text[len(base):].count("*"), module=module)


class TypeBuilder:
    """Fluent construction of a :class:`Type`."""

    def __init__(self, text: str, module: str) -> None:
        self._type = type_from_string(text, module)

    def base_type_language(self) -> TypeBuilder:
        self._type.base_type_language = True
        return self

    def optional(self) -> TypeBuilder:
        self._type.optional = True
        return self

    def unsized_collection(self) -> TypeBuilder:
        self._type.is_collection = True
        self._type.collection_size = None
        return self

    def collection_with_size(self, size: int) -> TypeBuilder:
        self._type.is_collection = True
        self._type.collection_size = size
        return self

    def generic_argument(self) -> TypeBuilder:
        self._type.is_generic_argument = True
        return self

    def with_generic_arguments(self, *args: Type) -> TypeBuilder:
        self._type.generic_arguments.extend(args)
        return self

    def build(self) -> Type:
        """Return a fresh copy of the type built so far."""
        return dataclasses.replace(
            self._type, generic_arguments=list(self._type.generic_arguments)
        )


def base_type_builder(text: str, module: str) -> TypeBuilder:
    """Start a builder for a built-in language type."""
    return TypeBuilder(text, module).base_type_language()


def generic_type_builder(text: str, module: str) -> TypeBuilder:
    """Start a builder for a module generic argument."""
    return TypeBuilder(text, module).generic_argument()
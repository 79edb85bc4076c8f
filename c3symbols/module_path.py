"""Module paths such as ``std::collections::map``."""

from __future__ import annotations

from dataclasses import dataclass, field

_MAX_MODULE_NAME_LENGTH = 31


@dataclass
class ModulePath:
    """A module path split into its ``::``-separated tokens."""

    tokens: list[str] = field(default_factory=list)

    @classmethod
    def from_string(cls, module: str) -> ModulePath:
        """Parse a ``::``-separated module name; the empty string is the empty path."""
        return cls(module.split("::") if module else [])

    @property
    def name(self) -> str:
        """The full module name joined with ``::``."""
        return "::".join(self.tokens)

    def __str__(self) -> str:
        return self.name

    def add_path(self, path: str) -> None:
        """Prepend a parent token to this path."""
        self.tokens.insert(0, path)

    def is_empty(self) -> bool:
        """Tell whether the path has no tokens."""
        return not self.tokens

    def is_submodule_of(self, parent: ModulePath) -> bool:
        """Tell whether this path equals ``parent`` or lies beneath it."""
        if len(self.tokens) < len(parent.tokens):
            return False
        return self.tokens[: len(parent.tokens)] == parent.tokens

    def is_implicitly_imported(self, other: ModulePath) -> bool:
        """Tell whether the two paths are the same or one contains the other."""
        if self.name == other.name:
            return True
        return self.is_submodule_of(other) or other.is_submodule_of(self)


def normalize_module_name(name: str) -> str:
    """Derive a valid module name from a file name.

    Drops a trailing ``.c3``, lower-cases letters and digits, replaces
    anything else by ``_`` and keeps at most 31 characters.
    """
    if name.endswith(".c3"):
        name = name[: -len(".c3")]

    result: list[str] = []
    for ch in name:
        if ch.isalpha() or ch.isnumeric():
            result.append(ch if ch.islower() else ch.lower()[:1] or ch)
        else:
            result.append("_")
        if len(result) >= _MAX_MODULE_NAME_LENGTH:
            break
    return "".join(result)
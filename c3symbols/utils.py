"""Small helpers: platform facts, feature flags and character tests."""

from __future__ import annotations

import platform

CPU_UNKNOWN = 0
CPU_64 = 64
CPU_32 = 32

_FEATURE_FLAGS = {
    "SIZE_ON_HOVER": False,
}

_ARCH_64 = {"amd64", "x86_64", "arm64", "aarch64"}
_ARCH_32 = {"386", "i386", "i686", "x86", "arm", "armv7l", "armv6l"}


def cpu_architecture() -> int:
    """Return the word size of the running machine in bits, or 0 if unknown."""
    machine = platform.machine().lower()
    if machine in _ARCH_64:
        return CPU_64
    if machine in _ARCH_32:
        return CPU_32
    return CPU_UNKNOWN


def pointer_size() -> int:
    """Return the pointer size in bytes, or 0 if the architecture is unknown."""
    arch = cpu_architecture()
    if arch != CPU_UNKNOWN:
        return arch // 8
    return 0


def is_feature_enabled(feature: str) -> bool:
    """Tell whether a named feature flag is on; unknown flags are off."""
    return _FEATURE_FLAGS.get(feature, False)


def is_identifier_char(ch: str) -> bool:
    """Tell whether ``ch`` can be part of an identifier."""
    return ch.isalpha() or ch.isdecimal() or ch in ("_", "$")


def is_new_line_sequence(first: str, second: str) -> bool:
    """Tell whether the two characters start a line break."""
    return (first == "\r" and second == "\n") or first == "\n"


def is_space_or_newline(ch: str) -> bool:
    """Tell whether ``ch`` is whitespace, line breaks included."""
    return ch in (" ", "\n", "\t", "\r") or ch.isspace()


def find_line_col_of_substring(text: str, substring: str) -> tuple[int, int]:
    """Find the first line holding ``substring``.

    Returns ``(line, column)`` with a one-based line and a zero-based column,
    or ``(0, 0)`` if the substring does not occur.
    """
    for number, line in enumerate(text.split("\n"), start=1):
        offset = line.find(substring)
        if offset >= 0:
            return number, offset
    return 0, 0
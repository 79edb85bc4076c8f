"""Symbol model and cross-module symbol table for C3 source code tooling."""

__version__ = "0.1.0"
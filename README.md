# c3symbols

A symbol model for C3 source code, meant for editor tooling such as language
servers. It describes modules, functions, macros, structs, unions,
bitstructs, enums, faults, `def` aliases, distinct types, interfaces and
variables. A symbol table keeps the modules of every registered document and
resolves type references and inline struct members across documents.

## Installing

```
pip install c3symbols
```

The package depends on nothing outside the standard library.

## What is inside

- `c3symbols.geometry`: `Position` and `Range`. `Position.index_in(content)`
  turns a line and a UTF-16 character offset into a string index (raising
  `ValueError` past the end of the content); `Range` has `has_position`,
  `is_before_position`, `is_after_position` and `is_after`. `make_range`
  builds a range from four numbers.
- `c3symbols.module_path`: `ModulePath` for `foo::bar::baz` paths, with
  `from_string`, `is_submodule_of` and `is_implicitly_imported`, and
  `normalize_module_name`, which derives a module name (lower case, `_` for
  other characters, at most 31 characters) from a file name.
- `c3symbols.typeref`: `Type`, `type_from_string`, `TypeBuilder`,
  `base_type_builder` and `generic_type_builder`. `str(Type)` renders pointers,
  collections and optionals, e.g. `int*[4]!`.
- `c3symbols.doc_comment`: `DocComment` with `@contract` entries,
  `DocCommentBuilder`, and `display_body_with_contracts()` for Markdown.
- `c3symbols.indexable`: the `Indexable` base shared by every symbol (name,
  module, document, ranges, children, nested scopes, `hover_info()`,
  `completion_detail()`), the `CompletionItemKind` and `SymbolType` enums and
  the generic `IndexableBuilder`.
- Symbol kinds, each with a builder:
  - `c3symbols.variable`: `Variable`, `ArgInfo`, `new_constant`, `VariableBuilder`
  - `c3symbols.aliases`: `Def`, `DefBuilder`, `new_def_type`, `Distinct`, `DistinctBuilder`
  - `c3symbols.function`: `Function`, `FunctionKind`, `FunctionBuilder`,
    `new_function`, `new_type_function`, `new_macro`, `new_type_macro`;
    `Function.display_signature()` renders signatures such as
    `fn void abc(int param)` or `macro void m(int x; @body)`
  - `c3symbols.enums`: `Enum`, `Enumerator`, `EnumBuilder`, `EnumeratorBuilder`
  - `c3symbols.faults`: `Fault`, `FaultConstant`, `FaultBuilder`, `FaultConstantBuilder`
  - `c3symbols.structs`: `Struct`, `StructMember`, `Bitstruct`, `new_union`,
    `new_inline_subtype`, `new_substruct_member`, `StructBuilder`, `BitstructBuilder`
  - `c3symbols.module`: `Module`, `ModuleBuilder`, `Interface`,
    `InterfaceBuilder`, `GenericParameter`
- `c3symbols.unit_modules.UnitModules`: the modules declared in one document,
  in order, with lookups for implicitly loadable modules and for the module
  the cursor is in.
- `c3symbols.pending.PendingToResolve`: type references and inline struct
  members to resolve once more documents are known.
- `c3symbols.symbols_table.SymbolsTable`: `register`, `delete_document`,
  `rename_document`, `get_by_doc` and `all`. Registering a document merges its
  pending work and resolves what it can.
- `c3symbols.utils`: small helpers such as `pointer_size()`,
  `is_feature_enabled()`, `is_identifier_char()` and
  `find_line_col_of_substring()`.

## Example

```python
from c3symbols.module import ModuleBuilder
from c3symbols.pending import PendingToResolve
from c3symbols.structs import StructBuilder
from c3symbols.symbols_table import SymbolsTable
from c3symbols.typeref import type_from_string
from c3symbols.unit_modules import UnitModules

doc = "app.c3"
module = ModuleBuilder("app", doc).build()
module.add_struct(
    StructBuilder("Base", "app", doc)
    .with_struct_member("a", type_from_string("int", "app"), "app", doc)
    .build()
)
module.add_struct(
    StructBuilder("Derived", "app", doc)
    .with_sub_struct_member("base", type_from_string("Base", "app"), "app", doc)
    .build()
)

units = UnitModules(doc)
units.set_module("app", module)

pending = PendingToResolve()
pending.add_struct_inline_members(module.structs["Derived"])

table = SymbolsTable()
table.register(units, pending)

print([m.name for m in module.structs["Derived"].members])
# ['base', 'a']
```

## What it does not do

The package holds and resolves symbols; it does not read C3 source. There is
no parser, no search for the symbol under a cursor, no language server and no
command-line tool. Symbols are created by the calling code, through the
constructors and builders above.

## Running the tests

```
pip install -e ".[test]"
pytest
```
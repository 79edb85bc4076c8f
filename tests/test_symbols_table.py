from c3symbols.aliases import DefBuilder, DistinctBuilder
from c3symbols.function import FunctionBuilder
from c3symbols.module import ModuleBuilder
from c3symbols.pending import PendingToResolve
from c3symbols.structs import StructBuilder
from c3symbols.symbols_table import SymbolsTable
from c3symbols.typeref import type_from_string
from c3symbols.unit_modules import UnitModules
from c3symbols.variable import VariableBuilder

DOC = "aDocId"
MOD = "xx"
DOC_B = "aDocBId"


def _register_other(table, mod_b, symbol_adder):
    unit_b = UnitModules(DOC_B)
    module_b = ModuleBuilder(mod_b, DOC_B).build()
    symbol_adder(module_b)
    unit_b.set_module(MOD, module_b)
    table.register(unit_b, PendingToResolve())


def test_should_expand_substructs():
    table = SymbolsTable()
    unit = UnitModules(DOC)
    module = ModuleBuilder(MOD, DOC).build()
    module.add_struct(
        StructBuilder("ToInline", MOD, DOC)
        .with_struct_member("a", type_from_string("int", MOD), MOD, DOC)
        .with_struct_member("b", type_from_string("char", MOD), MOD, DOC)
        .build()
    )
    module.add_struct(
        StructBuilder("ToProcess", MOD, DOC)
        .with_struct_member("c", type_from_string("int", MOD), MOD, DOC)
        .with_sub_struct_member("x", type_from_string("ToInline", MOD), MOD, DOC)
        .build()
    )
    unit.set_module("xx", module)

    pending = PendingToResolve()
    pending.add_struct_inline_members(module.structs["ToProcess"])
    table.register(unit, pending)

    members = module.structs["ToProcess"].members
    assert members[1].expanded_inline is True
    assert members[2].name == "a"
    assert members[2].type.name == "int"
    assert members[3].name == "b"
    assert members[3].type.name == "char"
    assert len(table.pending_to_resolve.subtyping_to_resolve) == 0


def test_resolves_variable_type_in_same_file_and_module():
    table = SymbolsTable()
    unit = UnitModules(DOC)
    module = ModuleBuilder(MOD, DOC).build()
    module.add_variable(VariableBuilder("value", type_from_string("Ref", MOD), MOD, DOC).build())
    module.add_def(DefBuilder("Ref", MOD, DOC).build())
    unit.set_module("xx", module)

    pending = PendingToResolve()
    pending.add_variable_types([module.variables["value"]], module)
    table.register(unit, pending)

    assert table.pending_to_resolve.types_for_module(MOD)[0].solved is True


def test_resolves_variable_type_in_different_file_and_module():
    table = SymbolsTable()
    unit = UnitModules(DOC)
    module = ModuleBuilder(MOD, DOC).build()
    module.add_variable(VariableBuilder("value", type_from_string("Ref", MOD), MOD, DOC).build())
    module.add_imports(["yy"])
    unit.set_module(MOD, module)
    pending = PendingToResolve()
    pending.add_variable_types([module.variables["value"]], module)
    table.register(unit, pending)

    assert table.pending_to_resolve.types_for_module(MOD)[0].solved is False

    _register_other(table, "yy", lambda m: m.add_def(DefBuilder("Ref", "yy", DOC_B).build()))

    assert table.pending_to_resolve.types_for_module(MOD)[0].solved is True
    assert module.variables["value"].type.full_qualified_name() == "yy::Ref"


def test_resolves_struct_member_type_in_different_file_and_module():
    table = SymbolsTable()
    unit = UnitModules(DOC)
    module = ModuleBuilder(MOD, DOC).build()
    module.add_struct(
        StructBuilder("CustomStruct", MOD, DOC)
        .with_struct_member("a", type_from_string("Ref", MOD), MOD, DOC)
        .with_struct_member("b", type_from_string("char", MOD), MOD, DOC)
        .build()
    )
    module.add_imports(["yy"])
    unit.set_module(MOD, module)
    pending = PendingToResolve()
    pending.add_struct_member_types(module.structs["CustomStruct"], module)
    table.register(unit, pending)

    _register_other(table, "yy", lambda m: m.add_def(DefBuilder("Ref", "yy", DOC_B).build()))

    assert table.pending_to_resolve.types_for_module(MOD)[0].solved is True
    member_type = module.structs["CustomStruct"].members[0].type
    assert member_type.full_qualified_name() == "yy::Ref"


def test_resolves_function_return_and_argument_types():
    table = SymbolsTable()
    unit = UnitModules(DOC)
    module = ModuleBuilder(MOD, DOC).build()
    module.add_function(
        FunctionBuilder("foo", type_from_string("Ref", MOD), MOD, DOC)
        .with_argument(VariableBuilder("zoo", type_from_string("Ref", MOD), MOD, DOC).build())
        .build()
    )
    module.add_imports(["yy"])
    unit.set_module(MOD, module)
    pending = PendingToResolve()
    pending.add_function_types(module.children_functions[0], module)
    table.register(unit, pending)

    _register_other(table, "yy", lambda m: m.add_def(DefBuilder("Ref", "yy", DOC_B).build()))

    function = module.children_functions[0]
    assert table.pending_to_resolve.types_for_module(MOD)[0].solved is True
    assert function.return_type.full_qualified_name() == "yy::Ref"
    assert function.arguments()[0].type.full_qualified_name() == "yy::Ref"


def test_resolves_def_type_in_different_file_and_module():
    table = SymbolsTable()
    unit = UnitModules(DOC)
    module = ModuleBuilder(MOD, DOC).build()
    module.add_def(
        DefBuilder("foo", MOD, DOC)
        .with_resolves_to_type(type_from_string("HashMap", MOD))
        .build()
    )
    module.add_imports(["std::collections::map"])
    unit.set_module(MOD, module)
    pending = PendingToResolve()
    pending.add_def_type(module.defs["foo"], module)
    table.register(unit, pending)

    mod_b = "std::collections::map"
    _register_other(table, mod_b, lambda m: m.add_struct(StructBuilder("HashMap", mod_b, DOC_B).build()))

    assert table.pending_to_resolve.types_for_module(MOD)[0].solved is True
    assert (
        module.defs["foo"].resolved_type.full_qualified_name()
        == "std::collections::map::HashMap"
    )


def test_resolves_distinct_in_different_file_and_module():
    table = SymbolsTable()
    unit = UnitModules(DOC)
    module = ModuleBuilder(MOD, DOC).build()
    module.add_distinct(
        DistinctBuilder("foo", MOD, DOC)
        .with_base_type(type_from_string("HashMap", MOD))
        .build()
    )
    module.add_imports(["std::collections::map"])
    unit.set_module(MOD, module)
    pending = PendingToResolve()
    pending.add_distinct_type(module.distincts["foo"], module)
    table.register(unit, pending)

    mod_b = "std::collections::map"
    _register_other(table, mod_b, lambda m: m.add_struct(StructBuilder("HashMap", mod_b, DOC_B).build()))

    assert table.pending_to_resolve.types_for_module(MOD)[0].solved is True
    assert (
        module.distincts["foo"].base_type.full_qualified_name()
        == "std::collections::map::HashMap"
    )


def test_delete_rename_and_lookup_documents():
    table = SymbolsTable()
    unit = UnitModules(DOC)
    table.register(unit, PendingToResolve())
    assert table.get_by_doc(DOC) is unit
    assert table.all() == {DOC: unit}

    table.rename_document(DOC, "renamed")
    assert table.get_by_doc(DOC) is None
    assert table.get_by_doc("renamed") is unit

    table.rename_document("missing", "other")
    assert set(table.all()) == {"renamed"}

    table.delete_document("renamed")
    assert table.all() == {}
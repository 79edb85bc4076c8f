import pytest

from c3symbols.aliases import Def, DefBuilder, Distinct, DistinctBuilder, new_def_type
from c3symbols.geometry import Range
from c3symbols.indexable import CompletionItemKind
from c3symbols.typeref import TypeBuilder, type_from_string


def test_def_to_identifier():
    definition = DefBuilder("Kilo", "xx", "doc").with_resolves_to("int").build()
    assert definition.resolves_to_type() is False
    assert definition.hover_info() == "def Kilo = int"
    assert definition.completion_detail() == "Alias for 'int'"
    assert definition.kind == CompletionItemKind.TYPE_PARAMETER


def test_def_to_macro_detail():
    definition = Def("@foo", "@bar", "xx", "doc")
    assert definition.completion_detail() == "Alias for macro '@bar'"


def test_def_to_type_with_generics():
    hashmap = (
        TypeBuilder("HashMap", "xx")
        .with_generic_arguments(type_from_string("char*", "xx"), type_from_string("int", "xx"))
        .build()
    )
    definition = DefBuilder("Map", "xx", "doc").with_resolves_to_type(hashmap).build()
    assert definition.resolves_to_type() is True
    assert definition.resolved_type is hashmap
    assert definition.hover_info() == "def Map = HashMap(<char*, int>)"
    assert definition.completion_detail() == "Type"


def test_new_def_type():
    definition = new_def_type("Ref", type_from_string("Foo", "xx"), "xx", "doc", Range(), Range())
    assert definition.resolves_to == ""
    assert definition.hover_info() == "def Ref = Foo"


def test_def_builder_renames():
    definition = DefBuilder("A", "xx", "doc").with_name("B").build()
    assert definition.name == "B"
    assert definition.fqn() == "xx::B"


def test_distinct_hover():
    distinct = DistinctBuilder("Kilo", "xx", "doc").with_base_type(type_from_string("int", "xx")).build()
    assert distinct.hover_info() == "distinct Kilo = int"
    assert distinct.completion_detail() == "Type"
    assert distinct.inline is False


def test_inline_distinct_hover():
    distinct = (
        DistinctBuilder("Kilo", "xx", "doc")
        .with_base_type(type_from_string("int", "xx"))
        .with_inline(True)
        .build()
    )
    assert distinct.hover_info() == "distinct Kilo = inline int"


def test_distinct_without_base_type_raises():
    with pytest.raises(ValueError):
        Distinct("Kilo", None, False, "xx", "doc").hover_info()


def test_distinct_builder_renames_and_flags():
    distinct = DistinctBuilder("A", "xx", "doc").with_name("B").without_source_code().build()
    assert distinct.name == "B"
    assert distinct.has_source_code is False
    assert distinct.base_type is None
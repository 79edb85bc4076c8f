from c3symbols.typeref import (
    Type,
    TypeBuilder,
    base_type_builder,
    generic_type_builder,
    type_from_string,
)


def test_type_from_string_plain():
    t = type_from_string("Emu", "app")
    assert t.name == "Emu"
    assert t.pointer == 0
    assert t.module == "app"
    assert str(t) == "Emu"


def test_type_from_string_pointer_round_trip():
    t = type_from_string("char*", "app")
    assert t.name == "char"
    assert t.pointer == 1
    assert str(t) == "char*"


def test_type_from_string_double_pointer_round_trips_text():
    assert str(type_from_string("int**", "m")) == "int**"


def test_full_qualified_name_user_type():
    t = type_from_string("HashMap", "std::collections::map")
    assert t.full_qualified_name() == "std::collections::map::HashMap"


def test_full_qualified_name_base_type():
    t = base_type_builder("int", "app").build()
    assert t.base_type_language
    assert t.full_qualified_name() == "int"


def test_set_module_changes_fqn():
    t = type_from_string("Ref", "xx")
    t.module = "yy"
    assert t.full_qualified_name() == "yy::Ref"


def test_optional_marker():
    t = TypeBuilder("int", "app").optional().build()
    assert t.optional
    assert str(t).endswith("!")
    assert str(t).startswith("int")


def test_unsized_collection_of_is_a_copy():
    original = type_from_string("int", "app")
    collection = original.unsized_collection_of()
    assert collection.is_collection
    assert collection.collection_size is None
    assert str(collection).endswith("[]")
    assert not original.is_collection
    assert str(original) == "int"


def test_collection_with_size():
    t = TypeBuilder("int", "app").collection_with_size(4).build()
    assert t.is_collection
    assert t.collection_size == 4
    assert str(t) == "int[4]"


def test_unsized_collection_builder():
    t = TypeBuilder("int", "app").collection_with_size(4).unsized_collection().build()
    assert t.collection_size is None
    assert str(t).endswith("[]")


def test_generic_type_builder_marks_argument():
    t = generic_type_builder("Type", "list").build()
    assert t.is_generic_argument
    assert not t.base_type_language


def test_display_with_generics():
    t = (
        TypeBuilder("List", "app")
        .with_generic_arguments(type_from_string("int", "app"), type_from_string("char", "app"))
        .build()
    )
    assert t.generic_arguments[1].name == "char"
    assert t.display_with_generics() == "List(<int, char>)"


def test_display_without_generics_is_plain_text():
    t = type_from_string("Emu*", "app")
    assert t.display_with_generics() == str(t)


def test_build_returns_independent_copies():
    builder = TypeBuilder("List", "app")
    first = builder.build()
    builder.with_generic_arguments(type_from_string("int", "app"))
    second = builder.build()
    assert first.generic_arguments == []
    assert len(second.generic_arguments) == 1


def test_types_compare_by_value():
    assert type_from_string("int", "app") == Type(name="int", module="app")
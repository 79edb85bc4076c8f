import pytest

from c3symbols.faults import (
    Fault,
    FaultBuilder,
    FaultConstant,
    FaultConstantBuilder,
)
from c3symbols.geometry import make_range
from c3symbols.indexable import CompletionItemKind


def _fault():
    constants = [
        FaultConstant("UNEXPECTED_ERROR", "WindowError", "app", "doc"),
        FaultConstant("SOMETHING_HAPPENED", "WindowError", "app", "doc"),
    ]
    return Fault("WindowError", "", constants, "app", "doc")


def test_constants_become_children():
    fault = _fault()
    assert fault.children_names == ["UNEXPECTED_ERROR", "SOMETHING_HAPPENED"]
    assert [c.name for c in fault.constants] == fault.children_names


def test_has_and_get_constant():
    fault = _fault()
    assert fault.has_constant("SOMETHING_HAPPENED")
    assert not fault.has_constant("OTHER")
    assert fault.get_constant("SOMETHING_HAPPENED") is fault.constants[1]


def test_get_missing_constant_raises():
    with pytest.raises(KeyError):
        _fault().get_constant("OTHER")


def test_register_constant():
    fault = _fault()
    pos = make_range(1, 2, 1, 12)
    fault.register_constant("LATE", "", pos)
    constant = fault.get_constant("LATE")
    assert constant.fault_name == "WindowError"
    assert constant.id_range == pos
    assert constant.doc_range == pos
    assert constant.document_uri == "doc"
    assert constant.module_string == "app"
    assert fault.children[-1] is constant


def test_fault_fqn_and_texts():
    constant = FaultConstant("BAD", "WindowError", "foo::bar", "doc")
    assert constant.fault_fqn() == "foo::bar::WindowError"
    assert constant.hover_info() == "BAD"
    assert constant.completion_detail() == "Fault Constant"
    fault = _fault()
    assert fault.hover_info() == "WindowError"
    assert fault.completion_detail() == "Fault"
    assert fault.kind == CompletionItemKind.ENUM


def test_fault_builder():
    constant = (
        FaultConstantBuilder("BAD", "app", "doc")
        .with_fault_name("WindowError")
        .with_identifier_range(1, 2, 1, 5)
        .build()
    )
    fault = (
        FaultBuilder("WindowError", "", "app", "doc")
        .with_constant(constant)
        .with_document_range(0, 0, 3, 1)
        .with_docs("errors")
        .build()
    )
    assert fault.constants == [constant]
    assert fault.doc_range == make_range(0, 0, 3, 1)
    assert fault.doc_comment.body == "errors"
    assert not fault.has_source_code
    assert constant.fault_name == "WindowError"
    assert constant.id_range == make_range(1, 2, 1, 5)
    assert constant.kind == CompletionItemKind.ENUM_MEMBER
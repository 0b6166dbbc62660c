import pathlib

import pytest

from typewriter import UnsupportedValueKind
from typewriter.stubs import attribute_stub, document_stub, value_annotation, write_stubs
from typewriter.vocabulary import AttributeInfo, ElementShape, ValueKind


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (ValueKind.BOOLEAN, "bool"),
        (ValueKind.BOOLEAN_OR_STRING, "bool | str"),
        (ValueKind.NUMBER, "int | float"),
        (ValueKind.NUMBER_OR_STRING, "int | float | str"),
        (ValueKind.URL, "str"),
        (ValueKind.COLOR, "str"),
        (ValueKind.ENUM, "str"),
    ],
)
def test_value_annotation(kind: ValueKind, expected: str):
    assert value_annotation(AttributeInfo("x", "", kind)) == expected


def test_enum_with_values_is_a_literal():
    info = AttributeInfo("dir", "Text direction", ValueKind.ENUM, ("ltr", "rtl"))

    assert value_annotation(info) == "Literal['ltr', 'rtl']"


def test_unknown_kind_fails():
    with pytest.raises(UnsupportedValueKind):
        value_annotation(AttributeInfo("x", "", "mystery"))  # type: ignore[arg-type]


def test_attribute_stub_declares_generated_methods():
    stub = attribute_stub()

    assert "    def accept_charset(self, value: str) -> Self: ...\n" in stub
    assert "    def async_(self, value: bool) -> Self: ...\n" in stub
    assert "    def onclick(self, value: str) -> Self: ...\n" in stub
    assert "    # URL of linked resource\n    def href(self, value: str) -> Self: ...\n" in stub
    assert stub.startswith("# Generated by")


def test_document_stub_uses_element_shapes():
    stub = document_stub({"div": ElementShape.CONTAINER, "br": ElementShape.VOID, "script": ElementShape.RAW})

    assert "def div(self, attr: Attribute | None = None, content: Content | None = None) -> Self" in stub
    assert "def br(self, attr: Attribute | None = None) -> Self" in stub
    assert "def script(self, attr: Attribute | None = None, content: RawContent | None = None) -> Self" in stub


def test_document_stub_mangles_keywords():
    assert "    def del_(self," in document_stub()


def test_write_stubs(tmp_path: pathlib.Path):
    written = write_stubs(tmp_path / "out")

    assert [path.name for path in written] == ["attribute.pyi", "document.pyi"]
    assert "class Attribute:" in written[0].read_text(encoding="utf-8")
    assert "class Document(Writer):" in written[1].read_text(encoding="utf-8")

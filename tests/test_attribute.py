import datetime

import pytest

from typewriter import Attribute, InvalidAttributeSuffix, UnsupportedValueKind, ValueKind


def test_chainable_attributes():
    assert Attribute().id("one").class_("k").render() == ' id="one" class="k"'


def test_configure_callable_receives_the_collection():
    attr = Attribute(lambda a: a.id("big").klass('a "b" c'))

    assert attr.render() == ' id="big" class="a &quot;b&quot; c"'


def test_keyword_attributes_follow_element_naming():
    attr = Attribute(id="one", class_="big", accept_charset="utf-8", for_="name")

    assert attr.render() == ' id="one" class="big" accept-charset="utf-8" for="name"'


def test_keyword_attributes_use_vocabulary_kinds():
    assert Attribute(disabled=True, hidden=False).render() == " disabled"


def test_unknown_keyword_is_a_custom_attribute():
    assert Attribute(hx_get="/items").render() == ' hx-get="/items"'


def test_empty_collection_renders_nothing():
    assert Attribute().render() == ""
    assert str(Attribute()) == ""


def test_to_html_is_none_safe():
    assert Attribute.to_html(None) == ""
    assert Attribute.to_html(Attribute(id="x")) == ' id="x"'


def test_to_html_rejects_other_types():
    with pytest.raises(TypeError):
        Attribute.to_html({"class": "my-class"})  # type: ignore[arg-type]


def test_data_attribute_requires_a_valid_suffix():
    assert Attribute().data("abc-def", "ok").render() == ' data-abc-def="ok"'

    with pytest.raises(InvalidAttributeSuffix):
        Attribute().data("abc:def", "ok")


@pytest.mark.parametrize("suffix", ["", "Upper", "with space", "under_score", "digit1", "abc\n"])
def test_invalid_suffixes_leave_the_collection_unchanged(suffix: str):
    attr = Attribute().id("one")

    with pytest.raises(InvalidAttributeSuffix) as raised:
        attr.namespaced("aria", suffix, "value")

    assert raised.value.suffix == suffix
    assert attr.render() == ' id="one"'


def test_namespaced_attribute():
    assert Attribute().namespaced("aria", "label", "Close").render() == ' aria-label="Close"'


def test_custom_attribute_last_value_wins():
    attr = Attribute().attribute("foo", "zoo").attribute("foo", "bar").attribute("x", "y")

    assert attr.render() == ' foo="bar" x="y"'


def test_attribute_is_defined_once_at_its_first_position():
    attr = Attribute().id("one").name("ok").id('"two"')

    assert attr.render() == ' id="&quot;two&quot;" name="ok"'


def test_values_are_escaped():
    attr = Attribute().href("javascript:alert('XSS')").title("<b>&</b>")

    assert attr.render() == ' href="javascript:alert(&#39;XSS&#39;)" title="&lt;b&gt;&amp;&lt;/b&gt;"'


def test_boolean_attributes():
    assert Attribute().disabled(True).render() == " disabled"
    assert Attribute().disabled(False).render() == ""
    assert Attribute().async_(True).defer(True).render() == " async defer"


def test_boolean_keeps_its_first_slot():
    assert Attribute().checked(True).id("a").checked(False).render() == ' id="a"'
    assert Attribute().checked(False).id("a").checked(True).render() == ' checked id="a"'


def test_boolean_or_string_attribute():
    assert Attribute().download(True).render() == " download"
    assert Attribute().download(False).render() == ""
    assert Attribute().download("report.pdf").render() == ' download="report.pdf"'


def test_numbers_and_dates_are_formatted():
    attr = (
        Attribute()
        .colspan(2)
        .width("50%")
        .step(0.5)
        .datetime(datetime.date(2024, 1, 2))
        .max(datetime.datetime(2024, 1, 2, 3, 4, 5))
        .min(10)
    )

    assert attr.render() == (
        ' colspan="2" width="50%" step="0.5" datetime="2024-01-02"'
        ' max="2024-01-02T03:04:05" min="10"'
    )


def test_enum_values_are_not_validated():
    assert Attribute().target("elsewhere").render() == ' target="elsewhere"'


def test_event_attributes_are_strings():
    assert Attribute().onclick("go('x')").render() == ' onclick="go(&#39;x&#39;)"'


def test_set_with_explicit_kind():
    attr = Attribute().set("inert", True, ValueKind.BOOLEAN).set("slot", "header")

    assert attr.render() == ' inert slot="header"'


def test_unknown_value_kind_is_rejected():
    with pytest.raises(UnsupportedValueKind):
        Attribute().set("id", "one", "string")  # type: ignore[arg-type]


def test_class_accepts_any_value():
    assert Attribute().class_(5).render() == ' class="5"'
    assert Attribute(class_=5).render() == ' class="5"'


def test_classes_include_only_true_flags():
    attr = Attribute().classes({"foo": True, "bar": False, "zoo": True})

    assert attr.render() == ' class="foo zoo"'


def test_classes_with_no_true_flags_is_empty_class():
    assert Attribute().classes({"foo": False}).render() == ' class=""'


def test_merge_combines_without_mutating():
    a = Attribute(lambda at: at.class_("ok").id("1"))
    b = Attribute(lambda at: at.name("foo"))

    c = a.merge(b)

    assert a.render() == ' class="ok" id="1"'
    assert b.render() == ' name="foo"'
    assert c.render() == ' class="ok" id="1" name="foo"'


def test_merge_right_side_wins():
    a = Attribute().id("one").name("ok").id('"two"')

    c = a.merge(Attribute().id("three"))

    assert a.render() == ' id="&quot;two&quot;" name="ok"'
    assert c.render() == ' id="three" name="ok"'


def test_merge_boolean_true_then_false_is_empty():
    a = Attribute().disabled(True)

    assert a.merge(Attribute().disabled(False)).render() == ""
    assert a.render() == " disabled"


def test_merge_rejects_other_types():
    with pytest.raises(TypeError):
        Attribute().merge({"id": "x"})  # type: ignore[arg-type]


def test_three_way_merge_is_associative_and_right_biased():
    a = Attribute().id("a").class_("a").title("a")
    b = Attribute().class_("b").name("b")
    c = Attribute().rel("c").id("c").name("c")

    left = a.merge(b).merge(c)
    right = a.merge(b.merge(c))

    expected = ' id="c" class="b" title="a" name="c" rel="c"'
    assert left.render() == expected
    assert right.render() == expected


def test_three_way_merge_disjoint_names_keep_collection_order():
    a = Attribute().id("a")
    b = Attribute().name("b")
    c = Attribute().title("c")

    assert a.merge(b).merge(c).render() == ' id="a" name="b" title="c"'
    assert a.merge(b.merge(c)).render() == ' id="a" name="b" title="c"'


def test_generated_methods_carry_descriptions():
    assert Attribute.href.__doc__ == "URL of linked resource"
    assert Attribute.accept_charset.__name__ == "accept_charset"

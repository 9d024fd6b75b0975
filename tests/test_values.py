from eztag.values import EM, PX, TagValue, TagValueUnit


def test_unit_of_normalizes_blank_and_strips():
    assert TagValueUnit.of(None) is None
    assert TagValueUnit.of("  ") is None
    assert TagValueUnit.of(" px ") == PX
    assert TagValueUnit.of(EM) is EM


def test_build_none_is_empty():
    assert TagValue(None, "px").build() == ""
    assert TagValue().is_empty()
    assert TagValue("").is_empty()
    assert not TagValue(0).is_empty()


def test_build_numbers():
    assert TagValue(10).build() == "10"
    assert TagValue(10.0, PX).build() == "10px"
    assert TagValue(1.5, "em").build() == "1.5em"
    assert TagValue(-3.0).build() == "-3"


def test_build_booleans_and_strings():
    assert TagValue(True).build() == "true"
    assert TagValue(False).build() == "false"
    assert TagValue("a & b").build() == "a & b"
    assert str(TagValue("x", "%")) == "x%"


def test_clone_copies_copyable_values():
    items = ["a"]
    original = TagValue(items, PX)
    clone = original.clone()
    assert clone is not original
    assert clone.value == items
    assert clone.value is not items
    assert clone.unit == PX


def test_clone_shares_values_without_copy_support():
    marker = object()
    clone = TagValue(marker).clone()
    assert clone.value is marker


def test_clone_uses_value_clone_method():
    inner = TagValue(5, PX)
    outer = TagValue(inner).clone()
    assert outer.value is not inner
    assert outer.value.build() == "5px"


def test_clone_shares_class_values():
    clone = TagValue(dict).clone()
    assert clone.value is dict

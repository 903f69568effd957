from grafboard.constant import Constant, default, values
from grafboard.variable import hide, hide_label, label


def test_new_constants_can_be_created():
    constant = Constant("percentile")

    assert constant.name == "percentile"
    assert constant.label == "percentile"
    assert constant.type == "constant"


def test_label_can_be_set():
    constant = Constant("const", label("Constant"))

    assert constant.name == "const"
    assert constant.label == "Constant"


def test_values_can_be_set():
    constant = Constant("const", values({"90th": "90", "95th": "95", "99th": "99"}))

    labels = [option.text for option in constant.options]
    vals = [option.value for option in constant.options]

    assert len(vals) == 3
    assert sorted(labels) == ["90th", "95th", "99th"]
    assert sorted(vals) == ["90", "95", "99"]
    assert constant.query == "90,95,99"


def test_default_value_can_be_set():
    constant = Constant("const", default("99th"))

    assert constant.current.text == ["99th"]
    assert constant.current.value == "99th"


def test_default_value_uses_matching_label():
    constant = Constant("const", values({"90th": "90", "95th": "95"}), default("95"))

    assert constant.current.text == ["95th"]
    assert constant.current.value == "95"


def test_label_can_be_hidden():
    constant = Constant("", hide_label())
    assert constant.hide == 1


def test_variable_can_be_hidden():
    constant = Constant("custom", hide())
    assert constant.hide == 2
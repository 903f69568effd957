import pytest

from grafboard.variable import (
    TemplateVar,
    VariableOption,
    all_value,
    hide,
    hide_label,
    include_all,
    label,
    multi,
    regex,
)


@pytest.fixture
def variable():
    return TemplateVar(name="var", type="custom", label="var")


def test_label_can_be_set(variable):
    label("Variable")(variable)
    assert variable.label == "Variable"
    assert variable.name == "var"


def test_label_can_be_hidden(variable):
    hide_label()(variable)
    assert variable.hide == 1


def test_variable_can_be_hidden(variable):
    hide()(variable)
    assert variable.hide == 2


def test_multi_can_be_enabled(variable):
    multi()(variable)
    assert variable.multi is True


def test_include_all_adds_an_option(variable):
    include_all()(variable)
    assert variable.include_all is True
    assert variable.options == [VariableOption(text="All", value="$__all")]


def test_all_value_can_be_set(variable):
    all_value(".*")(variable)
    assert variable.all_value == ".*"


def test_regex_can_be_set(variable):
    pattern = "^4\\d+$"
    regex(pattern)(variable)
    assert variable.regex == pattern


def test_defaults(variable):
    assert variable.hide == 0
    assert variable.options == []
    assert variable.current is None
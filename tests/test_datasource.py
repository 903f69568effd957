from grafboard.datasource import Datasource, datasource_type
from grafboard.variable import hide, hide_label, include_all, label, multi, regex


def test_new_datasource_variables_can_be_created():
    variable = Datasource("source")

    assert variable.name == "source"
    assert variable.label == "source"
    assert variable.type == "datasource"
    assert variable.refresh == 1


def test_label_can_be_set():
    variable = Datasource("datasource var", label("QueryVariable"))

    assert variable.name == "datasource var"
    assert variable.label == "QueryVariable"


def test_label_can_be_hidden():
    assert Datasource("", hide_label()).hide == 1


def test_variable_can_be_hidden():
    assert Datasource("", hide()).hide == 2


def test_multiple_variables_can_be_selected():
    assert Datasource("", multi()).multi is True


def test_an_option_to_include_all_can_be_added():
    assert Datasource("", include_all()).include_all is True


def test_values_can_be_filtered_by_regex():
    pattern = "^4\\d+$"
    assert Datasource("", regex(pattern)).regex == pattern


def test_data_source_type_can_be_set():
    assert Datasource("", datasource_type("prometheus")).query == "prometheus"
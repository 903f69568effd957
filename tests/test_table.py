from grafboard import panel, table
from grafboard.table import Aggregation, AggregationType, Table


def test_new_table_panels_can_be_created():
    t = Table("Table panel")

    assert t.is_new is False
    assert t.title == "Table panel"
    assert t.span == 6.0
    assert t.transform == "timeseries_to_rows"


def test_width_can_be_configured():
    assert Table("", panel.span(6)).span == 6.0


def test_height_can_be_configured():
    assert Table("", panel.height("400px")).height == "400px"


def test_data_source_can_be_configured():
    t = Table("", panel.data_source("prometheus-default"))

    assert t.datasource == "prometheus-default"


def test_columns_can_be_hidden():
    t = Table("", table.hide_column("Time.*"), table.hide_column("Duration.*"))

    assert len(t.styles) == 3
    assert t.styles[0].pattern == "Duration.*"
    assert t.styles[0].type == "hidden"
    assert t.styles[1].pattern == "Time.*"
    assert t.styles[1].type == "hidden"
    assert t.styles[2].pattern == "/.*/"
    assert t.styles[2].type == "string"


def test_data_can_be_transformed_in_time_series_to_rows():
    t = Table("", table.time_series_to_rows())

    assert t.transform == "timeseries_to_rows"


def test_data_can_be_transformed_in_time_series_to_columns():
    t = Table("", table.time_series_to_columns())

    assert t.transform == "timeseries_to_columns"


def test_data_can_be_transformed_as_json():
    assert Table("", table.as_json()).transform == "json"


def test_data_can_be_transformed_as_table():
    assert Table("", table.as_table()).transform == "table"


def test_data_can_be_transformed_as_annotations():
    assert Table("", table.as_annotations()).transform == "annotations"


def test_data_can_be_transformed_as_time_series_aggregations():
    t = Table(
        "",
        table.as_time_series_aggregations(
            [Aggregation(label="Average", type=AggregationType.AVG)]
        ),
    )

    assert t.transform == "timeseries_aggregations"
    assert len(t.columns) == 1
    assert t.columns[0].text == "Average"
    assert t.columns[0].value == "avg"


def test_background_can_be_transparent():
    assert Table("", panel.transparent()).transparent is True


def test_description_can_be_set():
    assert Table("", panel.description("lala")).description == "lala"
from grafboard import heatmap, heatmap_axis, panel
from grafboard.heatmap import DataFormatMode, Heatmap, LegendOption


def test_new_heatmap_panels_can_be_created():
    h = Heatmap("Heatmap panel")

    assert h.is_new is False
    assert h.title == "Heatmap panel"
    assert h.span == 6.0


def test_defaults():
    h = Heatmap("")

    assert h.data_format == "tsbuckets"
    assert h.hide_zero_buckets is True
    assert h.highlight_cards is True
    assert h.card_color == "#b4ff00"
    assert h.color_scale == "sqrt"
    assert h.color_scheme == "interpolateSpectral"
    assert h.color_exponent == 0.5
    assert h.color_mode == "spectrum"
    assert h.legend_show is True
    assert h.tooltip_show is True
    assert h.tooltip_show_histogram is True
    assert h.x_axis_show is True
    assert h.y_bucket_bound == "auto"
    assert h.y_axis.format == "short"


def test_width_can_be_configured():
    assert Heatmap("", panel.span(6)).span == 6.0


def test_height_can_be_configured():
    assert Heatmap("", panel.height("400px")).height == "400px"


def test_background_can_be_transparent():
    assert Heatmap("", panel.transparent()).transparent is True


def test_description_can_be_set():
    assert Heatmap("", panel.description("lala")).description == "lala"


def test_data_source_can_be_configured():
    h = Heatmap("", panel.data_source("prometheus-default"))

    assert h.datasource == "prometheus-default"


def test_data_format_can_be_configured():
    h = Heatmap("", heatmap.data_format(DataFormatMode.TIME_SERIES_BUCKETS))

    assert h.data_format == "tsbuckets"


def test_data_format_time_series():
    h = Heatmap("", heatmap.data_format(DataFormatMode.TIME_SERIES))

    assert h.data_format == "timeseries"


def test_repeat_can_be_configured():
    assert Heatmap("", panel.repeat("ds")).repeat == "ds"


def test_legend_can_be_hidden():
    assert Heatmap("", heatmap.legend(LegendOption.HIDE)).legend_show is False


def test_zero_buckets_can_be_hidden():
    assert Heatmap("", heatmap.hide_zero_buckets()).hide_zero_buckets is True


def test_zero_buckets_can_be_displayed():
    assert Heatmap("", heatmap.show_zero_buckets()).hide_zero_buckets is False


def test_cards_can_be_highlighted():
    assert Heatmap("", heatmap.highlight_cards()).highlight_cards is True


def test_cards_can_be_not_highlighted():
    assert Heatmap("", heatmap.no_highlight_cards()).highlight_cards is False


def test_y_buckets_can_be_reversed():
    assert Heatmap("", heatmap.reverse_y_buckets()).reverse_y_buckets is True


def test_tooltips_can_be_hidden():
    assert Heatmap("", heatmap.hide_tooltip()).tooltip_show is False


def test_tooltip_histograms_can_be_hidden():
    h = Heatmap("", heatmap.hide_tooltip_histogram())

    assert h.tooltip_show_histogram is False


def test_tooltip_decimals_can_be_configured():
    assert Heatmap("", heatmap.tooltip_decimals(3)).tooltip_decimals == 3


def test_x_axis_can_be_hidden():
    assert Heatmap("", heatmap.hide_x_axis()).x_axis_show is False


def test_y_axis_can_be_set():
    h = Heatmap("", heatmap.y_axis(heatmap_axis.unit("none")))

    assert h.y_axis.format == "none"
"""Widget Catalog - boundary validation of widget type strings."""

import pytest

from wallboard.core.errors import UnknownWidgetTypeError
from wallboard.core.widget_catalog import (
    DEFAULT_CATALOG, WidgetCatalog, WidgetTypeInfo, normalize_widget_type,
)


def test_default_catalog_ids_in_display_order():
    assert DEFAULT_CATALOG.ids == ["weather", "stock", "news"]


def test_normalize_lowercases_and_strips():
    assert normalize_widget_type("  Weather ", DEFAULT_CATALOG) == "weather"
    assert normalize_widget_type("STOCK", DEFAULT_CATALOG) == "stock"


def test_unknown_type_rejected():
    with pytest.raises(UnknownWidgetTypeError) as exc_info:
        normalize_widget_type("calendar", DEFAULT_CATALOG)
    err = exc_info.value
    assert err.code == "UNKNOWN_WIDGET_TYPE"
    assert err.http_status == 400
    assert err.context.widget_type == "calendar"


def test_empty_type_rejected():
    with pytest.raises(UnknownWidgetTypeError):
        normalize_widget_type("", DEFAULT_CATALOG)


def test_custom_catalog():
    catalog = WidgetCatalog([WidgetTypeInfo("clock", "Clock", "Local time")])
    assert normalize_widget_type("Clock", catalog) == "clock"
    assert "weather" not in catalog
    assert [info.name for info in catalog] == ["Clock"]

"""Widget Catalog - the known widget types and boundary validation of type strings.

Invariants:
    - Catalog ids are lower-case and unique
    - normalize_widget_type() either returns a catalog id or raises UnknownWidgetTypeError

Design Decisions:
    - Catalog passed into the orchestrator: deployments can swap the set of tiles without touching core
    - Presentation metadata (icon, colour) stays in the frontend; only id/name/description live here
"""

from dataclasses import dataclass

from wallboard.core.domain_types import WidgetType
from wallboard.core.errors import UnknownWidgetTypeError


@dataclass(frozen=True)
class WidgetTypeInfo:
    id: WidgetType
    name: str
    description: str


class WidgetCatalog:
    """Read-only registry of widget types, in display order."""

    def __init__(self, types: list[WidgetTypeInfo]):
        self._types = {t.id: t for t in types}

    def __contains__(self, widget_type: object) -> bool:
        return widget_type in self._types

    def __iter__(self):
        return iter(self._types.values())

    @property
    def ids(self) -> list[str]:
        return list(self._types)


DEFAULT_CATALOG = WidgetCatalog([
    WidgetTypeInfo(WidgetType("weather"), "Weather", "Current weather conditions"),
    WidgetTypeInfo(WidgetType("stock"), "Stock Price", "Real-time stock prices"),
    WidgetTypeInfo(WidgetType("news"), "News Feed", "Latest news articles"),
])


def normalize_widget_type(raw: str, catalog: WidgetCatalog) -> WidgetType:
    """Strip + lower-case `raw` and check it against the catalog."""
    normalized = (raw or "").strip().lower()
    if normalized not in catalog:
        raise UnknownWidgetTypeError(raw, catalog.ids)
    return WidgetType(normalized)

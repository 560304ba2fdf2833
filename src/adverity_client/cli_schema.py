"""Schema describing important fields for CLI table rendering."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

Row = Mapping[str, Any]
ValueFormatter = Callable[[Any], str]
SortKey = Callable[[Row], Any]


@dataclass(frozen=True)
class Column:
    """Describe how to pull and format a column for Rich tables."""

    header: str
    keys: tuple[str, ...] = ()
    formatter: ValueFormatter | None = None
    justify: str = "left"

    def render(self, row: Row) -> str:
        value: Any | None = None
        if self.keys:
            for key in self.keys:
                if key in row:
                    value = row.get(key)
                    if value is not None:
                        break
        if value is None:
            return ""
        if self.formatter:
            formatted = self.formatter(value)
            return "" if formatted is None else str(formatted)
        return str(value)


@dataclass(frozen=True)
class TableView:
    """Describe a Rich table for a CLI command."""

    title: str
    columns: tuple[Column, ...]
    sort_key: SortKey | None = None


def _bool_formatter(value: Any) -> str:
    if value is None:
        return ""
    return "Yes" if bool(value) else "No"


def _list_formatter(*, max_chars: int = 32, sep: str = ", ") -> ValueFormatter:
    def _formatter(value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            s = sep.join(str(v) for v in value)
        else:
            s = str(value)
        return s if len(s) <= max_chars else s[: max_chars - 1] + "…"

    return _formatter


def _sort_name(row: Row) -> str:
    return str(row.get("name") or row.get("slug") or "").lower()


def _catalog_view(title: str, *extra: Column) -> TableView:
    return TableView(
        title=title,
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Name", keys=("name",)),
            Column("Slug", keys=("slug",)),
            *extra,
        ),
        sort_key=_sort_name,
    )


_DEPRECATED = Column(
    "Deprecated",
    keys=("is_deprecated",),
    formatter=_bool_formatter,
    justify="center",
)
_CATEGORIES = Column("Categories", keys=("categories",), formatter=_list_formatter())

CLI_TABLE_VIEWS: dict[str, TableView] = {
    "types.connection": _catalog_view("Connection Types", _CATEGORIES, _DEPRECATED),
    "types.authorization": _catalog_view("Authorization Types", _CATEGORIES, _DEPRECATED),
    "types.datastream": _catalog_view(
        "Datastream Types",
        _CATEGORIES,
        Column(
            "Connection Types",
            keys=("connection_types",),
            formatter=_list_formatter(max_chars=24),
        ),
        _DEPRECATED,
    ),
    "types.destination": _catalog_view("Destination Types"),
}

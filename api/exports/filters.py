"""
Free-text search filter for the station/bike search and export queries.

The search text is always a bound parameter. A caller-supplied attribute
only ever selects a column from `STATION_ATTRIBUTE_COLUMNS`; it is never
copied into the SQL text.
"""

from __future__ import annotations

from dataclasses import dataclass

# Public attribute name -> qualified column on the `stanice s` alias.
STATION_ATTRIBUTE_COLUMNS = {
    "id": "s.id",
    "naziv": "s.naziv",
    "adresa": "s.adresa",
    "kapacitet": "s.kapacitet",
    "geo_lat": "s.geo_lat",
    "geo_lon": "s.geo_lon",
    "aktivna": "s.aktivna",
    "datum_posljednje_aktivnosti": "s.datum_posljednje_aktivnosti",
}

# Default columns when no attribute is given.
JOINED_SEARCH_COLUMNS = ("s.id", "s.naziv", "s.adresa", "s.kapacitet", "b.id", "b.status", "b.tip")
STATION_SEARCH_COLUMNS = ("s.id", "s.naziv", "s.adresa")

ALL_ATTRIBUTES = "all"


class UnknownAttributeError(ValueError):
    def __init__(self, attribute: str) -> None:
        super().__init__(f"Unsupported search attribute: {attribute}")
        self.attribute = attribute


@dataclass(frozen=True)
class SearchFilter:
    where: str
    params: tuple[str, ...]


NO_FILTER = SearchFilter(where="", params=())


def resolve_attribute(attribute: str | None) -> str | None:
    """
    Map an attribute name to its column, or None for the default search.
    """
    name = (attribute or "").strip()
    if not name or name == ALL_ATTRIBUTES:
        return None
    column = STATION_ATTRIBUTE_COLUMNS.get(name)
    if column is None:
        raise UnknownAttributeError(name)
    return column


def build_search_filter(
    search: str | None,
    attribute: str | None,
    *,
    default_columns: tuple[str, ...],
) -> SearchFilter:
    # Validate even when there is nothing to search for.
    column = resolve_attribute(attribute)
    if not search or not search.strip():
        return NO_FILTER

    columns = (column,) if column is not None else default_columns
    clause = " OR ".join(f"CAST({c} AS TEXT) ILIKE $1" for c in columns)
    return SearchFilter(where=f"WHERE {clause}", params=(f"%{search}%",))

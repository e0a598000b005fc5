"""
List Query Parsing.

Turns the query-string language of list endpoints into typed values:

    ?daily_capacity[gte]=2&name[in]=Pine,Oak   filters
    ?sort=name,-daily_capacity                 ordering (leading '-' = descending)
    ?select=name,address                       projection

Only fields declared by the caller are accepted; anything else is a
ValidationError so typos surface as 400 instead of being silently ignored.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from campground_api.core.exceptions import ValidationError

FILTER_OPERATORS = frozenset({"eq", "gt", "gte", "lt", "lte", "in"})

# Query parameters that steer the listing itself and are never filters
RESERVED_PARAMS = frozenset({"select", "sort", "page", "limit"})

_FILTER_KEY = re.compile(r"^(?P<field>[A-Za-z_][A-Za-z0-9_]*)(?:\[(?P<op>[a-z]+)\])?$")


@dataclass(frozen=True)
class FieldFilter:
    """A single `field <op> value` condition."""

    field: str
    op: str
    value: Any


@dataclass(frozen=True)
class SortKey:
    field: str
    descending: bool = False


def _coerce(field: str, raw: str, field_type: type) -> Any:
    try:
        return field_type(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"Invalid value for {field}",
            details={field: f"Expected {field_type.__name__}, got {raw!r}"},
        ) from exc


def parse_filters(
    params: Iterable[tuple[str, str]],
    fields: Mapping[str, type],
) -> list[FieldFilter]:
    """
    Parse filter conditions from raw query parameters.

    Args:
        params: (key, value) pairs as received, reserved keys included
        fields: Filterable field names mapped to the type values coerce to

    Raises:
        ValidationError: Unknown field, unknown operator or bad value
    """
    filters: list[FieldFilter] = []
    for key, raw in params:
        if key in RESERVED_PARAMS:
            continue

        match = _FILTER_KEY.match(key)
        if match is None or match.group("field") not in fields:
            raise ValidationError(
                f"Cannot filter on {key}",
                details={"filterable_fields": sorted(fields)},
            )

        field = match.group("field")
        op = match.group("op") or "eq"
        if op not in FILTER_OPERATORS:
            raise ValidationError(
                f"Unknown filter operator {op}",
                details={"operators": sorted(FILTER_OPERATORS)},
            )

        field_type = fields[field]
        if op == "in":
            value: Any = [
                _coerce(field, part.strip(), field_type)
                for part in raw.split(",")
                if part.strip()
            ]
        else:
            value = _coerce(field, raw, field_type)

        filters.append(FieldFilter(field=field, op=op, value=value))
    return filters


def _split_fields(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def parse_sort(
    raw: str | None,
    fields: Iterable[str],
    default: str = "-created_at",
) -> list[SortKey]:
    """Parse a comma separated sort expression; falls back to `default`."""
    allowed = set(fields)
    keys: list[SortKey] = []
    for part in _split_fields(raw or default):
        descending = part.startswith("-")
        name = part.lstrip("-+")
        if name not in allowed:
            raise ValidationError(
                f"Cannot sort on {name}",
                details={"sortable_fields": sorted(allowed)},
            )
        keys.append(SortKey(field=name, descending=descending))
    return keys


def parse_select(raw: str | None, fields: Iterable[str]) -> list[str] | None:
    """Parse a projection; `None` means all fields. `id` is always included."""
    if not raw:
        return None
    allowed = set(fields)
    selected = _split_fields(raw)
    unknown = [name for name in selected if name not in allowed]
    if unknown:
        raise ValidationError(
            f"Cannot select {', '.join(unknown)}",
            details={"selectable_fields": sorted(allowed)},
        )
    if "id" not in selected:
        selected.insert(0, "id")
    return selected

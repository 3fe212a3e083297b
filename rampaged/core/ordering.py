"""Sort-string translation: ``"-name,age"`` -> ``ORDER BY name DESC, age ASC``.

A sort string is a comma-separated list of field names, each optionally
prefixed with ``-`` for descending order. The first field is the primary
key; later fields break ties.

Public field names can be remapped to a property address (a dotted path
across relationships) through an :class:`EntityDescriptor`::

    ORDER_FIELDS = EntityDescriptor.from_schema(
        OrderOut, aliases={"customer": "customer.last_name"},
    )
    stmt = order_by_if(stmt, True, "-customer,id", Order, ORDER_FIELDS)

Unknown field names are not rejected while parsing. They are passed through
unchanged and fail when the ordering is applied to the query, which raises
:class:`~rampaged.core.exceptions.InvalidSortError` carrying the raw string.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel
from sqlalchemy import Select, inspect
from sqlalchemy.orm import aliased
from sqlalchemy.sql.elements import ColumnElement

from rampaged.core.exceptions import InvalidSortError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_DESCENDING_PREFIX = "-"
_PATH_SEPARATOR = "."


class Direction(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class SortTerm:
    """One comma-delimited unit of a sort string."""

    field_name: str
    descending: bool = False

    @property
    def direction(self) -> Direction:
        return Direction.DESCENDING if self.descending else Direction.ASCENDING

    def __str__(self) -> str:
        return f"{_DESCENDING_PREFIX if self.descending else ''}{self.field_name}"


@dataclass(frozen=True)
class FieldAlias:
    """Public field name -> property address used for ordering."""

    field_name: str
    address: str


@dataclass(frozen=True)
class DescribedField:
    name: str
    alias: FieldAlias | None = None


class EntityDescriptor:
    """Static description of an entity's sortable fields and their aliases.

    Built once at startup and passed explicitly to the resolver. Lookups are
    case-insensitive.
    """

    def __init__(self, name: str, fields: Iterable[str] = (), aliases: Mapping[str, str] | None = None):
        self.name = name
        self._fields: dict[str, DescribedField] = {}
        for field_name in fields:
            self._fields[field_name.lower()] = DescribedField(field_name)
        for field_name, address in (aliases or {}).items():
            self._fields[field_name.lower()] = DescribedField(
                field_name, FieldAlias(field_name, address),
            )

    @classmethod
    def from_schema(
        cls, schema: type[BaseModel], aliases: Mapping[str, str] | None = None, name: str | None = None,
    ) -> EntityDescriptor:
        """Describe a pydantic schema: its fields plus an explicit alias map.

        Serialization aliases (``amountCents``) map back to the attribute
        name (``amount_cents``) unless ``aliases`` says otherwise.
        """
        serialized = {
            field.alias: field_name
            for field_name, field in schema.model_fields.items()
            if field.alias and field.alias.lower() != field_name.lower()
        }
        return cls(name or schema.__name__, schema.model_fields.keys(), {**serialized, **(aliases or {})})

    @classmethod
    def from_model(
        cls, model: type, aliases: Mapping[str, str] | None = None, name: str | None = None,
    ) -> EntityDescriptor:
        """Describe a mapped SQLAlchemy class: its columns and relationships."""
        mapper = inspect(model)
        fields = [*mapper.column_attrs.keys(), *mapper.relationships.keys()]
        return cls(name or model.__name__, fields, aliases)

    def find(self, field_name: str) -> DescribedField | None:
        return self._fields.get(field_name.lower())

    @property
    def aliases(self) -> list[FieldAlias]:
        return [f.alias for f in self._fields.values() if f.alias is not None]

    def __contains__(self, field_name: str) -> bool:
        return self.find(field_name) is not None

    def __repr__(self) -> str:
        return f"EntityDescriptor({self.name!r}, fields={len(self._fields)}, aliases={len(self.aliases)})"


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _is_blank(sort_string: str | None) -> bool:
    return sort_string is None or not sort_string.strip()


def parse_sort(sort_string: str | None) -> list[SortTerm]:
    """Split a sort string into terms, left to right."""
    if _is_blank(sort_string):
        return []

    terms = []
    for raw in sort_string.split(","):
        raw = raw.strip()
        if raw.startswith(_DESCENDING_PREFIX):
            terms.append(SortTerm(raw[len(_DESCENDING_PREFIX):].strip(), descending=True))
        else:
            terms.append(SortTerm(raw))
    return terms


def resolve_ordering(sort_string: str | None, descriptor: EntityDescriptor | None = None) -> list[SortTerm]:
    """Parse ``sort_string`` and substitute aliased fields from ``descriptor``.

    Aliases with an empty address drop their term. Fields that are not
    aliased, or not described at all, are kept verbatim.
    """
    terms = parse_sort(sort_string)
    if descriptor is None:
        return terms

    resolved = []
    for term in terms:
        described = descriptor.find(term.field_name)
        if described is None or described.alias is None:
            resolved.append(term)
        elif described.alias.address:
            resolved.append(SortTerm(described.alias.address, term.descending))
    return resolved


# ---------------------------------------------------------------------------
# SQLAlchemy
# ---------------------------------------------------------------------------

class _PathNotFound(LookupError):
    pass


class _OrderingPlan:
    """ORDER BY clauses for a model plus the outer joins they need."""

    def __init__(self, model: type):
        self.model = model
        self.clauses: list[ColumnElement] = []
        self.joins: list[Any] = []
        self._aliases: dict[tuple[str, ...], Any] = {}

    def _join(self, entity: Any, prefix: tuple[str, ...]) -> Any:
        if prefix in self._aliases:
            return self._aliases[prefix]

        relationship = inspect(entity).mapper.relationships.get(prefix[-1])
        if relationship is None or relationship.uselist:
            raise _PathNotFound(_PATH_SEPARATOR.join(prefix))

        target = aliased(relationship.mapper.class_)
        self.joins.append(getattr(entity, prefix[-1]).of_type(target))
        self._aliases[prefix] = target
        return target

    def column(self, path: str) -> ColumnElement:
        segments = path.split(_PATH_SEPARATOR)
        if not all(segments):
            raise _PathNotFound(path)

        entity: Any = self.model
        for depth in range(1, len(segments)):
            entity = self._join(entity, tuple(segments[:depth]))

        if segments[-1] not in inspect(entity).mapper.column_attrs:
            raise _PathNotFound(path)
        return getattr(entity, segments[-1])

    def add(self, term: SortTerm) -> None:
        column = self.column(term.field_name)
        self.clauses.append(column.desc() if term.descending else column.asc())

    def apply(self, stmt: Select) -> Select:
        for onclause in self.joins:
            stmt = stmt.outerjoin(onclause)
        return stmt.order_by(*self.clauses)


def _primary_entity(stmt: Select) -> type | None:
    descriptions = stmt.column_descriptions
    return descriptions[0].get("entity") if descriptions else None


def build_order_by(model: type, terms: Sequence[SortTerm], sort_string: str | None = None) -> _OrderingPlan:
    """Resolve ``terms`` against ``model``; raise InvalidSortError on any miss."""
    plan = _OrderingPlan(model)
    try:
        for term in terms:
            plan.add(term)
    except _PathNotFound as exc:
        logger.debug("Sort path %r not found on %s", str(exc), getattr(model, "__name__", model))
        raise InvalidSortError(sort_string if sort_string is not None else ",".join(map(str, terms))) from exc
    return plan


def order_by_if(
    stmt: Select | None,
    condition: bool,
    sort_string: str | None,
    model: type | None = None,
    descriptor: EntityDescriptor | None = None,
) -> Select | None:
    """Apply ``sort_string`` as ORDER BY when ``condition`` holds.

    A None statement or a blank sort string leaves the statement untouched.
    """
    if not condition or stmt is None or _is_blank(sort_string):
        return stmt

    terms = resolve_ordering(sort_string, descriptor)
    if not terms:
        return stmt

    model = model or _primary_entity(stmt)
    if model is None:
        raise InvalidSortError(sort_string)

    plan = build_order_by(model, terms, sort_string)
    logger.debug("Ordering %s by %s", model.__name__, ", ".join(map(str, terms)))
    return plan.apply(stmt)


# ---------------------------------------------------------------------------
# In-memory sequences
# ---------------------------------------------------------------------------

def _lookup(item: Any, path: str) -> Any:
    value = item
    for segment in path.split(_PATH_SEPARATOR):
        if isinstance(value, Mapping):
            value = value[segment]
        else:
            value = getattr(value, segment)
    return value


def _sort_key(path: str):
    def key(item: Any) -> tuple[bool, Any]:
        value = _lookup(item, path)
        return value is None, value
    return key


def sort_by_if(
    items: Iterable[T] | None,
    condition: bool,
    sort_string: str | None,
    descriptor: EntityDescriptor | None = None,
) -> list[T]:
    """List counterpart of :func:`order_by_if` (objects or mappings)."""
    if items is None:
        return []
    result = list(items)
    if not condition or _is_blank(sort_string):
        return result

    terms = resolve_ordering(sort_string, descriptor)
    try:
        # Stable sorts applied from the least significant key up.
        for term in reversed(terms):
            if not term.field_name:
                raise KeyError(term.field_name)
            result.sort(key=_sort_key(term.field_name), reverse=term.descending)
    except (AttributeError, KeyError, TypeError) as exc:
        raise InvalidSortError(sort_string) from exc
    return result

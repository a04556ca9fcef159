from dataclasses import fields, replace
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

Predicate = Callable[[Any], bool]


class TableAccessor:
    """In-memory table of immutable records with queryset-style lookups.

    Lookups accept ``field=value`` for equality and ``field__in=values`` for
    membership. A callable predicate may be combined with them.
    """

    def __init__(self, record_type: type) -> None:
        self.record_type = record_type
        self._rows: List[Any] = []
        self._field_names = frozenset(f.name for f in fields(record_type))

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self):
        return iter(list(self._rows))

    def all(self) -> List[Any]:
        """Return every row in storage order."""
        return list(self._rows)

    def count(self, predicate: Optional[Predicate] = None, **lookup: Any) -> int:
        """Return the number of rows matching."""
        return len(self.filter(predicate, **lookup))

    def list(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Sequence[str] = (),
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> List[Any]:
        """Return a filtered, ordered and sliced list of rows."""
        rows = self.filter(**(filters or {}))
        rows = self._apply_ordering(rows, order_by)
        return self._apply_slice(rows, offset=offset, limit=limit)

    def _apply_ordering(self, rows: List[Any], order_by: Sequence[str]) -> List[Any]:
        # Sorts are stable, so apply keys from last to first.
        for key in reversed(list(order_by)):
            descending = key.startswith("-")
            name = key.lstrip("-")
            self._check_field(name)
            rows = sorted(rows, key=lambda row: getattr(row, name), reverse=descending)
        return rows

    def _apply_slice(
        self, rows: List[Any], *, offset: int = 0, limit: Optional[int] = None
    ) -> List[Any]:
        start = max(0, int(offset))
        end = None if limit is None else start + max(0, int(limit))
        return rows[start:end]

    def insert(self, record: Any, *, at_head: bool = False) -> Any:
        """Store a record. Ids are assumed unique and are not checked."""
        self._check_type(record)
        if at_head:
            self._rows.insert(0, record)
        else:
            self._rows.append(record)
        return record

    def insert_at(self, index: int, record: Any) -> Any:
        """Store a record at a given position."""
        self._check_type(record)
        self._rows.insert(index, record)
        return record

    def find(self, predicate: Optional[Predicate] = None, **lookup: Any) -> Optional[Any]:
        """Return the first matching row, or None."""
        for row in self._rows:
            if self._matches(row, predicate, lookup):
                return row
        return None

    def filter(self, predicate: Optional[Predicate] = None, **lookup: Any) -> List[Any]:
        """Return every matching row in storage order."""
        return [row for row in self._rows if self._matches(row, predicate, lookup)]

    def exists(self, predicate: Optional[Predicate] = None, **lookup: Any) -> bool:
        return self.find(predicate, **lookup) is not None

    def update(self, lookup: Union[Mapping[str, Any], Predicate], **data: Any) -> Optional[Any]:
        """Shallow-merge ``data`` into the first row matching ``lookup``.

        ``lookup`` is a mapping of field lookups or a predicate. Returns the
        new row, or None when nothing matched.
        """
        predicate = lookup if callable(lookup) else None
        lookup = {} if predicate else lookup
        for name in data:
            self._check_field(name)
        for index, row in enumerate(self._rows):
            if self._matches(row, predicate, lookup):
                updated = replace(row, **data)
                self._rows[index] = updated
                return updated
        return None

    def delete(self, predicate: Optional[Predicate] = None, **lookup: Any) -> int:
        """Delete every matching row; return count deleted."""
        kept = [row for row in self._rows if not self._matches(row, predicate, lookup)]
        count = len(self._rows) - len(kept)
        self._rows = kept
        return count

    def _matches(self, row: Any, predicate: Optional[Predicate], lookup: Mapping[str, Any]) -> bool:
        if predicate is not None and not predicate(row):
            return False
        for key, expected in lookup.items():
            name, _, op = key.partition("__")
            self._check_field(name)
            value = getattr(row, name)
            if op == "in":
                if value not in expected:
                    return False
            elif op:
                raise ValueError(f"Unsupported lookup '{key}'")
            elif value != expected:
                return False
        return True

    def _check_type(self, record: Any) -> None:
        if not isinstance(record, self.record_type):
            raise TypeError(
                f"{type(record).__name__} cannot be stored in a {self.record_type.__name__} table"
            )

    def _check_field(self, name: str) -> None:
        if name not in self._field_names:
            raise ValueError(f"{self.record_type.__name__} has no field '{name}'")


def snapshot_rows(tables: Dict[str, TableAccessor]) -> Dict[str, List[Any]]:
    """Copy the rows of several tables at once."""
    return {name: table.all() for name, table in tables.items()}

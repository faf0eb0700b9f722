from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import sqlalchemy as sa


@dataclass
class UpsertPlan:
    """Field-level merge rules for one keyed record.

    ``key``        identity columns, used to find the row.
    ``on_insert``  written only when the row is created.
    ``always``     written on create and on every update.
    ``increments`` added to the current value; on create the base is the
                   ``on_insert`` value for that column, or 0.

    ``apply`` runs the rules against an in-memory row; ``statement`` turns them
    into a single ``INSERT .. ON CONFLICT DO UPDATE`` so the database applies
    them atomically per key.
    """

    key: dict[str, Any]
    on_insert: dict[str, Any] = field(default_factory=dict)
    always: dict[str, Any] = field(default_factory=dict)
    increments: dict[str, int] = field(default_factory=dict)

    def insert_values(self) -> dict[str, Any]:
        values = {**self.on_insert, **self.always, **self.key}
        for col, step in self.increments.items():
            values[col] = (self.on_insert.get(col) or 0) + step
        return values

    def apply(self, existing: dict[str, Any] | None) -> dict[str, Any]:
        if existing is None:
            return self.insert_values()

        merged = dict(existing)
        merged.update(self.always)
        for col, step in self.increments.items():
            merged[col] = (merged.get(col) or 0) + step
        return merged

    def statement(self, insert, table: sa.Table):
        """Build the upsert from a dialect ``insert`` construct (postgresql/sqlite)."""
        stmt = insert(table).values(**self.insert_values())

        update_set: dict[str, Any] = dict(self.always)
        for col, step in self.increments.items():
            update_set[col] = table.c[col] + step

        if not update_set:
            return stmt.on_conflict_do_nothing(index_elements=list(self.key))
        return stmt.on_conflict_do_update(index_elements=list(self.key), set_=update_set)

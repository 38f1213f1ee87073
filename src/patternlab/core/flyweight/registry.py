"""
Shared-instance registry (flyweight factory).

The registry maps a composite key, the tuple of a record's defining fields,
to exactly one record instance. Field-equal requests always return the
*identical* object, so callers can compare records with ``is``.

Key construction
----------------
Keys are tuples of ``(field, type, value)`` triples in the record model's
declaration order, taken from the *validated* record, so coerced inputs
(``1`` for a ``float`` field) key the same as their canonical form. Tuple keys
cannot collide the way joined strings can (``"a-b", "c"`` vs ``"a", "b-c"``),
and carrying the value type keeps ``1``, ``1.0`` and ``True`` apart in union
fields even though they hash equal. NaN and infinity are rejected, since NaN
never compares equal to itself.

Lifetime
--------
Records are never evicted: a registry grows monotonically and its records live
as long as it does. Registries are plain objects; construct one per context
and pass it where it is needed.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from patternlab.core.errors import MalformedKey
from patternlab.core.result import Result, err, ok
from patternlab.core.settings import get_logger

from .records import SCALAR_TYPES, SharedRecord

R = TypeVar("R", bound=SharedRecord)
RecordKey = tuple[tuple[str, type, Any], ...]

logger = get_logger("patternlab.flyweight")


@dataclass(frozen=True, slots=True)
class RegistryStats:
    """Lookup counters for a registry."""

    lookups: int
    hits: int
    created: int

    @property
    def misses(self) -> int:
        return self.lookups - self.hits


class SharedRegistry(Generic[R]):
    """
    Deduplicating factory for immutable records of one type.

    Attributes
    ----------
    _record_type : type[R]
        The record model built on a miss.
    _records : dict[RecordKey, R]
        Key -> shared instance, in insertion order.
    _lock : threading.Lock
        Guards lookup-or-insert as one critical section.
    """

    __slots__ = ("_record_type", "_records", "_lock", "_lookups", "_hits")

    def __init__(self, record_type: type[R]) -> None:
        self._record_type = record_type
        self._records: dict[RecordKey, R] = {}
        self._lock = threading.Lock()
        self._lookups = 0
        self._hits = 0

    @property
    def record_type(self) -> type[R]:
        return self._record_type

    # ------------------------------- Keys -----------------------------------

    def _validate(self, fields: Mapping[str, Any]) -> R:
        """
        Build a candidate record from ``fields``.

        Raises
        ------
        MalformedKey
            If a defining field is missing, an unknown field is given, a value
            is not a str/int/float/bool scalar, or the record model rejects it
            (wrong type, NaN or infinity).
        """
        expected = self._record_type.key_fields()
        missing = [name for name in expected if name not in fields]
        if missing:
            raise MalformedKey(f"{self._record_type.__name__}: missing fields {missing}")
        unknown = sorted(set(fields) - set(expected))
        if unknown:
            raise MalformedKey(f"{self._record_type.__name__}: unknown fields {unknown}")
        for name in expected:
            value = fields[name]
            if not isinstance(value, SCALAR_TYPES):
                raise MalformedKey(
                    f"{self._record_type.__name__}.{name}: expected a scalar, "
                    f"got {type(value).__name__}"
                )
        try:
            return self._record_type(**fields)
        except ValidationError as exc:
            raise MalformedKey(str(exc)) from exc

    def _key_of(self, record: SharedRecord) -> RecordKey:
        values = record.model_dump()
        return tuple(
            (name, type(values[name]), values[name]) for name in self._record_type.key_fields()
        )

    def make_key(self, fields: Mapping[str, Any]) -> RecordKey:
        """
        Build the composite key for ``fields`` from their validated values.

        ``size=1`` and ``size=1.0`` give the same key for a ``float`` field,
        since both validate to ``1.0``.

        Raises
        ------
        MalformedKey
            See :meth:`_validate`.
        """
        return self._key_of(self._validate(fields))

    # ------------------------------ Lookup ----------------------------------

    def get_or_create(self, **fields: Any) -> R:
        """
        Return the shared record for ``fields``, creating it on first request.

        The candidate record is validated before the lock is taken; on a hit
        it is discarded, so only one instance per key is ever visible. A
        rejected request changes neither the records nor the counters.
        """
        candidate = self._validate(fields)
        key = self._key_of(candidate)
        with self._lock:
            self._lookups += 1
            existing = self._records.get(key)
            if existing is not None:
                self._hits += 1
                return existing
            self._records[key] = candidate
            logger.debug(
                "created %s #%d %s",
                self._record_type.__name__,
                len(self._records) - 1,
                dict(fields),
            )
            return candidate

    def try_get_or_create(self, **fields: Any) -> Result[R, MalformedKey]:
        """Like :meth:`get_or_create`, but return ``Err(MalformedKey)`` instead of raising."""
        try:
            return ok(self.get_or_create(**fields))
        except MalformedKey as exc:
            return err(exc)

    def lookup(self, **fields: Any) -> R | None:
        """Return the shared record for ``fields`` if it exists; never creates one."""
        key = self.make_key(fields)
        with self._lock:
            return self._records.get(key)

    def handle_of(self, record: SharedRecord) -> int | None:
        """
        Return the insertion ordinal of ``record`` if this registry owns it.

        Ownership is by identity: an equal record built elsewhere has no handle.
        """
        if not isinstance(record, self._record_type):
            return None
        key = self._key_of(record)
        with self._lock:
            for index, (stored_key, stored) in enumerate(self._records.items()):
                if stored_key == key:
                    return index if stored is record else None
        return None

    # ---------------------------- Introspection ------------------------------

    def records(self) -> tuple[R, ...]:
        """Return every shared record in creation order."""
        with self._lock:
            return tuple(self._records.values())

    def stats(self) -> RegistryStats:
        with self._lock:
            return RegistryStats(
                lookups=self._lookups, hits=self._hits, created=len(self._records)
            )

    def __contains__(self, fields: object) -> bool:
        if not isinstance(fields, Mapping):
            return False
        try:
            key = self.make_key(fields)
        except MalformedKey:
            return False
        with self._lock:
            return key in self._records

    def __iter__(self) -> Iterator[R]:
        return iter(self.records())

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __repr__(self) -> str:
        return f"SharedRegistry({self._record_type.__name__}, size={len(self)})"


__all__ = ["SharedRegistry", "RegistryStats", "RecordKey"]

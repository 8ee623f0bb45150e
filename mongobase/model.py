"""Common metadata fields for documents stored in MongoDB collections."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from typing import Any, ClassVar, Mapping, TypeVar

from bson import ObjectId

ZERO_OBJECT_ID = ObjectId(bytes(12))

_T = TypeVar("_T", bound="BaseCollection")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _zero_object_id() -> ObjectId:
    return ObjectId(bytes(12))


@dataclass(kw_only=True)
class BaseCollection:
    """Identifier and lifecycle timestamps shared by every stored document.

    Subclass it as a dataclass and add the document's own fields; they are
    stored under their attribute names.
    """

    oid: ObjectId = field(default_factory=_zero_object_id)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    _KEYS: ClassVar[dict[str, str]] = {"oid": "_id"}
    _OMIT_WHEN_EMPTY: ClassVar[frozenset[str]] = frozenset(
        {"oid", "updated_at", "deleted_at"}
    )

    def set_insert_meta(self) -> None:
        """Give the document a fresh ObjectId and stamp its creation time."""
        self.oid = ObjectId()
        self.created_at = _now()

    def set_update_meta(self) -> None:
        """Stamp the time of the latest update."""
        self.updated_at = _now()

    def set_delete_meta(self) -> None:
        """Mark the document as soft deleted now."""
        self.deleted_at = _now()

    def is_deleted(self) -> bool:
        """Whether the document has been soft deleted."""
        return self.deleted_at is not None

    @property
    def id(self) -> str:
        """The ObjectId as a 24-character hex string."""
        return str(self.oid)

    @classmethod
    def _is_empty(cls, name: str, value: Any) -> bool:
        if name == "oid":
            return value == ZERO_OBJECT_ID
        return value is None

    def to_document(self) -> dict[str, Any]:
        """Return the document as a mapping ready to store."""
        document: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in self._OMIT_WHEN_EMPTY and self._is_empty(f.name, value):
                continue
            document[self._KEYS.get(f.name, f.name)] = value
        return document

    @classmethod
    def from_document(cls: type[_T], document: Mapping[str, Any]) -> _T:
        """Build an instance from a stored mapping, ignoring unknown keys."""
        values: dict[str, Any] = {}
        for f in fields(cls):
            if not f.init:
                continue
            key = cls._KEYS.get(f.name, f.name)
            if key in document:
                values[f.name] = document[key]
        return cls(**values)
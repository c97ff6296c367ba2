"""
Explicit change tracking for models.

This module provides:
- FieldChanges: Snapshot of which fields differ from the last persisted state
- ChangeTrackingModel: Abstract model that records its loaded values and reports changes
"""

from collections.abc import Iterable
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Self

from django.db import models


@dataclass(frozen=True, slots=True)
class FieldChanges:
    """Fields changed on a model instance since it was last loaded or saved."""

    is_new: bool
    changed: frozenset[str] = field(default_factory=frozenset)

    def has_changed(self, name: str) -> bool:
        """Return True if the field (by name or attname) changed, or the record is new."""
        return self.is_new or name in self.changed or f"{name}_id" in self.changed


class ChangeTrackingModel(models.Model):
    """
    Abstract model that keeps a copy of its persisted values.

    Subclasses call get_field_changes() before writing and pass the result to their validators.
    """

    class Meta:
        """Metadata for the ChangeTrackingModel."""

        abstract = True

    @classmethod
    def from_db(cls, db: str | None, field_names: Any, values: Any) -> Self:
        """Build the instance from a database row and remember the loaded values."""
        instance = super().from_db(db, field_names, values)
        instance._loaded_values = deepcopy(dict(zip(field_names, values, strict=True)))
        return instance

    def _current_values(self) -> dict[str, Any]:
        return deepcopy(
            {
                f.attname: getattr(self, f.attname)
                for f in self._meta.concrete_fields
                if f.attname not in self.get_deferred_fields()
            },
        )

    def get_field_changes(self) -> FieldChanges:
        """
        Compare the instance to its last persisted state.

        A field that was deferred when loading and has since been assigned counts as changed.
        """
        attnames = [f.attname for f in self._meta.concrete_fields]
        loaded = getattr(self, "_loaded_values", None)
        if self._state.adding or loaded is None:
            return FieldChanges(is_new=True, changed=frozenset(attnames))

        changed = frozenset(
            name
            for name in attnames
            if (name in loaded and getattr(self, name) != loaded[name])
            or (name not in loaded and name in self.__dict__)
        )
        return FieldChanges(is_new=False, changed=changed)

    def save(self, *args: Any, **kwargs: Any) -> None:
        """Write the instance and reset the snapshot to the values just stored."""
        super().save(*args, **kwargs)
        self._loaded_values = self._current_values()

    def refresh_from_db(
        self,
        using: str | None = None,
        fields: Iterable[str] | None = None,
        **kwargs: Any,
    ) -> None:
        """
        Reload from the database and reset the snapshot of the reloaded fields.

        Loading a deferred attribute goes through here with a single field, so unsaved changes
        to the other fields stay visible to get_field_changes().
        """
        fields = list(fields) if fields is not None else None
        super().refresh_from_db(using=using, fields=fields, **kwargs)
        loaded = getattr(self, "_loaded_values", None)
        if fields is None or loaded is None:
            self._loaded_values = self._current_values()
            return

        for f in self._meta.concrete_fields:
            if (f.name in fields or f.attname in fields) and f.attname in self.__dict__:
                loaded[f.attname] = deepcopy(getattr(self, f.attname))

from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Sequence

from returns.result import Failure, Result, Success

from plate_configurator.core.domain.model.catalog import Option, OptionKind
from plate_configurator.core.domain.model.errors import (
    ConfiguratorError,
    DuplicateOption,
    OptionNotFound,
    ValidationError,
)
from plate_configurator.core.ports.outbound.options import OptionRepository


@dataclass
class InMemoryOptionRepository(OptionRepository):
    kind: OptionKind
    _store: Dict[int, Option] = field(default_factory=dict)
    _next_id: int = 1
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def list(self) -> Result[Sequence[Option], ConfiguratorError]:
        with self._lock:
            return Success(tuple(self._store.values()))  # insertion order

    def get(self, option_id: int) -> Result[Option, ConfiguratorError]:
        with self._lock:
            found = self._store.get(option_id)
        if found is None:
            return Failure(self._not_found(option_id))
        return Success(found)

    def create(self, fields: Mapping[str, Any]) -> Result[Option, ConfiguratorError]:
        with self._lock:
            taken = self._discriminator_taken(fields, exclude_id=None)
            if taken is not None:
                return Failure(taken)
            try:
                option = self.kind.record_type(id=self._next_id, **fields)
            except TypeError as e:
                return Failure(ValidationError(message=f"invalid {self.kind.label}: {e}"))
            # ids are never reused, even if a later write fails
            self._next_id += 1
            self._store[option.id] = option
        return Success(option)

    def update(
        self, option_id: int, changes: Mapping[str, Any]
    ) -> Result[Option, ConfiguratorError]:
        with self._lock:
            existing = self._store.get(option_id)
            if existing is None:
                return Failure(self._not_found(option_id))
            taken = self._discriminator_taken(changes, exclude_id=option_id)
            if taken is not None:
                return Failure(taken)
            try:
                updated = replace(existing, **{k: v for k, v in changes.items() if k != "id"})
            except TypeError as e:
                return Failure(ValidationError(message=f"invalid {self.kind.label}: {e}"))
            self._store[option_id] = updated
        return Success(updated)

    # caller holds the lock
    def _discriminator_taken(
        self, fields: Mapping[str, Any], exclude_id: int | None
    ) -> DuplicateOption | None:
        attr = self.kind.discriminator
        wanted = fields.get(attr)
        if wanted is None:
            return None
        for opt in self._store.values():
            if opt.id != exclude_id and getattr(opt, attr) == wanted:
                return DuplicateOption(
                    message=f"{attr} already in use by id={opt.id}",
                    kind=self.kind.value,
                    discriminator=str(wanted),
                )
        return None

    def _not_found(self, option_id: int) -> OptionNotFound:
        return OptionNotFound(
            message=f"{self.kind.label} not found",
            kind=self.kind.value,
            option_id=option_id,
        )


def build_option_repositories() -> Dict[OptionKind, InMemoryOptionRepository]:
    return {kind: InMemoryOptionRepository(kind=kind) for kind in OptionKind}

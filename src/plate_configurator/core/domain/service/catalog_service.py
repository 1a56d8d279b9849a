from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from returns.result import Failure, Result, Success

from plate_configurator.core.domain.model.catalog import (
    CatalogSnapshot,
    Option,
    OptionKind,
)
from plate_configurator.core.domain.model.errors import (
    ConfiguratorError,
    PersistenceError,
)
from plate_configurator.core.domain.service.validation import (
    validate_new_option,
    validate_option_changes,
)
from plate_configurator.core.ports.inbound.catalog import CatalogUseCase
from plate_configurator.core.ports.outbound.options import OptionRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogDeps:
    repositories: Mapping[OptionKind, OptionRepository]


@dataclass(frozen=True)
class CatalogService(CatalogUseCase):
    deps: CatalogDeps

    def list_options(
        self, kind: OptionKind
    ) -> Result[Sequence[Option], ConfiguratorError]:
        return self._repository(kind).bind(lambda repo: repo.list())

    def create_option(
        self, kind: OptionKind, fields: Mapping[str, Any]
    ) -> Result[Option, ConfiguratorError]:
        result = self._repository(kind).bind(
            lambda repo: validate_new_option(kind, fields).bind(repo.create)
        )
        if isinstance(result, Success):
            logger.info("created %s id=%s", kind.label, result.unwrap().id)
        return result

    def update_option(
        self, kind: OptionKind, option_id: int, changes: Mapping[str, Any]
    ) -> Result[Option, ConfiguratorError]:
        result = self._repository(kind).bind(
            lambda repo: repo.get(option_id)
            .bind(lambda _: validate_option_changes(kind, changes))
            .bind(lambda valid: repo.update(option_id, valid))
        )
        if isinstance(result, Success):
            logger.info(
                "updated %s id=%s fields=%s", kind.label, option_id, sorted(changes)
            )
        return result

    def snapshot(self) -> Result[CatalogSnapshot, ConfiguratorError]:
        collected: dict[OptionKind, tuple[Option, ...]] = {}
        for kind in OptionKind:
            listed = self.list_options(kind)
            if isinstance(listed, Failure):
                return listed
            collected[kind] = tuple(listed.unwrap())
        return Success(CatalogSnapshot(options=collected))

    def _repository(
        self, kind: OptionKind
    ) -> Result[OptionRepository, ConfiguratorError]:
        repo = self.deps.repositories.get(kind)
        if repo is None:
            return Failure(PersistenceError(f"no repository for {kind.value}"))
        return Success(repo)

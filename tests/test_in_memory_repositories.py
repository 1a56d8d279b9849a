from __future__ import annotations

import threading
from decimal import Decimal

from returns.result import Failure, Success

from plate_configurator.adapters.outbound.in_memory_options import (
    InMemoryOptionRepository,
)
from plate_configurator.adapters.outbound.in_memory_orders import (
    InMemoryOrderRepository,
)
from plate_configurator.core.domain.model.catalog import Badge, OptionKind
from plate_configurator.core.domain.model.errors import (
    DuplicateOption,
    OptionNotFound,
    OrderNotFound,
)
from plate_configurator.core.domain.model.order import (
    NewOrder,
    OrderItem,
    PaymentStatus,
    now_utc,
)


def _badges() -> InMemoryOptionRepository:
    repo = InMemoryOptionRepository(kind=OptionKind.BADGES)
    repo.create({"code": "gb", "name": "GB Badge", "price": Decimal("4.99")})
    repo.create({"code": "eu", "name": "EU Badge", "price": Decimal("4.99")})
    return repo


def test_create_assigns_fresh_id_and_defaults_price():
    repo = _badges()
    before = {o.id for o in repo.list().unwrap()}

    created = repo.create({"code": "de", "name": "DE Badge"}).unwrap()

    assert created.id not in before
    assert created.price == Decimal("0.00")
    listed = repo.list().unwrap()
    assert [o for o in listed if o.id not in before] == [created]


def test_list_preserves_insertion_order():
    repo = _badges()
    assert [o.code for o in repo.list().unwrap()] == ["gb", "eu"]


def test_update_changes_only_given_fields():
    repo = _badges()
    original = repo.get(1).unwrap()

    updated = repo.update(1, {"name": "X"}).unwrap()

    assert updated == Badge(
        id=original.id,
        code=original.code,
        name="X",
        price=original.price,
        image_url=original.image_url,
    )


def test_update_ignores_id_change():
    repo = _badges()
    updated = repo.update(2, {"id": 99, "name": "Europe"}).unwrap()
    assert updated.id == 2
    assert isinstance(repo.get(99), Failure)


def test_update_missing_id_fails_without_mutation():
    repo = _badges()
    before = repo.list().unwrap()

    result = repo.update(42, {"name": "Ghost"})

    assert isinstance(result, Failure)
    assert isinstance(result.failure(), OptionNotFound)
    assert repo.list().unwrap() == before


def test_duplicate_discriminator_is_rejected_on_create_and_update():
    repo = _badges()

    created = repo.create({"code": "gb", "name": "Another GB"})
    assert isinstance(created.failure(), DuplicateOption)

    moved = repo.update(2, {"code": "gb"})
    assert isinstance(moved.failure(), DuplicateOption)

    # keeping its own code is not a conflict
    assert isinstance(repo.update(1, {"code": "gb", "price": Decimal("5.49")}), Success)


def test_ids_are_never_reused_after_failed_create():
    repo = _badges()
    repo.create({"code": "gb", "name": "dup"})
    created = repo.create({"code": "fr", "name": "FR Badge"}).unwrap()
    assert created.id == 3


def test_concurrent_creates_get_distinct_ids():
    repo = InMemoryOptionRepository(kind=OptionKind.TEXT_STYLES)

    def worker(n: int) -> None:
        for i in range(25):
            repo.create({"style": f"s-{n}-{i}", "name": "Style"})

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [o.id for o in repo.list().unwrap()]
    assert sorted(ids) == list(range(1, 201))


def _new_order(total: str = "19.99", status: PaymentStatus = PaymentStatus.PENDING, customization=None) -> NewOrder:
    return NewOrder(
        customization=customization,
        items=(OrderItem(id=1, name="Front Only", price=Decimal(total)),),
        total_price=Decimal(total),
        payment_status=status,
        payment_id=None,
        created_at=now_utc(),
    )


def test_order_save_assigns_sequential_ids(customization):
    repo = InMemoryOrderRepository()

    first = repo.save(_new_order(customization=customization)).unwrap()
    second = repo.save(_new_order(customization=customization)).unwrap()

    assert (first.order_id, second.order_id) == (1, 2)
    assert repo.get(2).unwrap() == second
    assert [o.order_id for o in repo.list().unwrap()] == [1, 2]


def test_order_get_missing_is_not_found():
    result = InMemoryOrderRepository().get(7)
    assert isinstance(result.failure(), OrderNotFound)

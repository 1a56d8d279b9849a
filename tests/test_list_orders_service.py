from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from itertools import count

import pytest

from plate_configurator.adapters.outbound.in_memory_orders import (
    InMemoryOrderRepository,
)
from plate_configurator.core.domain.model.errors import ValidationError
from plate_configurator.core.domain.model.order import (
    NewOrder,
    OrderItem,
    PaymentStatus,
)
from plate_configurator.core.domain.service.list_orders_service import (
    ListOrdersDeps,
    ListOrdersService,
)
from plate_configurator.core.ports.inbound.list_orders import (
    ListOrdersQuery,
    OrderSummaryQuery,
)

START = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def orders(customization) -> InMemoryOrderRepository:
    repo = InMemoryOrderRepository()
    minutes = count()
    rows = [
        ("AB12 CDE", "24.98", PaymentStatus.COMPLETED),
        ("XY70 ZZZ", "19.99", PaymentStatus.PENDING),
        ("LN05 ABC", "42.97", PaymentStatus.COMPLETED),
        ("AB99 QQQ", "34.99", PaymentStatus.FAILED),
    ]
    for reg, total, status in rows:
        repo.save(
            NewOrder(
                customization=replace(customization, registration_number=reg),
                items=(OrderItem(id=1, name="Plate", price=Decimal(total)),),
                total_price=Decimal(total),
                payment_status=status,
                payment_id=None,
                created_at=START + timedelta(minutes=next(minutes)),
            )
        )
    return repo


@pytest.fixture
def service(orders) -> ListOrdersService:
    return ListOrdersService(ListOrdersDeps(orders=orders))


def test_lists_every_order_in_creation_order(service):
    listed = service.list_orders(ListOrdersQuery()).unwrap()
    assert [o.order_id for o in listed] == [1, 2, 3, 4]


def test_search_matches_registration_case_insensitively(service):
    listed = service.list_orders(ListOrdersQuery(search="qqq")).unwrap()
    assert [o.customization.registration_number for o in listed] == ["AB99 QQQ"]


def test_search_matches_order_id(service):
    listed = service.list_orders(ListOrdersQuery(search="3")).unwrap()
    assert [o.order_id for o in listed] == [3]


@pytest.mark.parametrize("search", ["", "   "])
def test_blank_search_lists_everything(service, search):
    listed = service.list_orders(ListOrdersQuery(search=search)).unwrap()
    assert [o.order_id for o in listed] == [1, 2, 3, 4]


def test_summary_counts_revenue_and_latest(service, orders):
    summary = service.summarize(OrderSummaryQuery(latest=2)).unwrap()

    everything = orders.list().unwrap()
    expected_revenue = sum(
        (o.total_price for o in everything if o.payment_status is PaymentStatus.COMPLETED),
        Decimal("0"),
    )

    assert summary.total_orders == 4
    assert summary.counts_by_status == {
        PaymentStatus.PENDING: 1,
        PaymentStatus.COMPLETED: 2,
        PaymentStatus.FAILED: 1,
    }
    assert summary.revenue == expected_revenue == Decimal("67.95")
    assert [o.order_id for o in summary.latest] == [4, 3]


@pytest.mark.parametrize("latest", [0, -1, 101])
def test_summary_rejects_bad_latest(service, latest):
    result = service.summarize(OrderSummaryQuery(latest=latest))
    assert isinstance(result.failure(), ValidationError)


def test_summary_revenue_out_of_range_is_a_validation_error(customization):
    repo = InMemoryOrderRepository()
    huge = Decimal("9" * 26)
    for _ in range(2):
        repo.save(
            NewOrder(
                customization=customization,
                items=(OrderItem(id=1, name="Plate", price=huge),),
                total_price=huge,
                payment_status=PaymentStatus.COMPLETED,
                payment_id=None,
                created_at=START,
            )
        )

    result = ListOrdersService(ListOrdersDeps(orders=repo)).summarize(OrderSummaryQuery())

    assert isinstance(result.failure(), ValidationError)

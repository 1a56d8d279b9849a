from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, FastAPI, Header, Query, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from returns.result import Failure, Success

from plate_configurator.adapters.inbound.web.schemas import (
    OPTION_SCHEMAS,
    CreateOrderRequest,
    CreateOrderResponse,
    ErrorResponse,
    OrderOut,
    OrderSummaryResponse,
    QuoteRequest,
    QuoteResponse,
    WireModel,
    items_to_wire,
    option_to_wire,
    order_to_wire,
    to_customization,
    to_items,
)
from plate_configurator.core.domain.model.catalog import OptionKind
from plate_configurator.core.domain.model.errors import (
    ConfiguratorError,
    DuplicateOption,
    OptionNotFound,
    OrderNotFound,
    PersistenceError,
    PriceMismatch,
    PublishError,
    Unauthorized,
    ValidationError,
)
from plate_configurator.core.ports.inbound.catalog import CatalogUseCase
from plate_configurator.core.ports.inbound.get_order import (
    GetOrderQuery,
    GetOrderUseCase,
)
from plate_configurator.core.ports.inbound.list_orders import (
    ListOrdersQuery,
    ListOrdersUseCase,
    OrderSummaryQuery,
)
from plate_configurator.core.ports.inbound.place_order import (
    PlaceOrderCommand,
    PlaceOrderUseCase,
)
from plate_configurator.core.ports.inbound.quote import QuoteUseCase
from plate_configurator.core.ports.outbound.auth import AdminAuthenticator

logger = logging.getLogger(__name__)

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _map_error_to_http(err: ConfiguratorError) -> tuple[int, ErrorResponse]:
    if isinstance(err, PriceMismatch):
        return 400, ErrorResponse(
            type=type(err).__name__,
            message=err.message,
            details=[{"expected": float(err.expected), "submitted": float(err.submitted)}],
        )

    if isinstance(err, ValidationError):
        return 400, ErrorResponse(type=type(err).__name__, message=str(err))

    if isinstance(err, Unauthorized):
        return 401, ErrorResponse(type=type(err).__name__, message=str(err))

    if isinstance(err, (OptionNotFound, OrderNotFound)):
        return 404, ErrorResponse(type=type(err).__name__, message=err.message)

    if isinstance(err, DuplicateOption):
        return 409, ErrorResponse(type=type(err).__name__, message=str(err))

    if isinstance(err, PublishError):
        return 503, ErrorResponse(type=type(err).__name__, message=str(err))

    if isinstance(err, PersistenceError):
        return 500, ErrorResponse(type=type(err).__name__, message=str(err))

    return 500, ErrorResponse(type=type(err).__name__, message=str(err))


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def _order_id(raw: str) -> int:
    """Non-numeric ids map to 0, which never names an order."""
    return int(raw) if raw.isdecimal() else 0


def _parse(model: type[WireModel], payload: dict[str, Any]) -> dict[str, Any]:
    """Validate a JSON body against a per-kind model; keep only sent fields."""
    try:
        parsed = model.model_validate(payload)
    except PydanticValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False)) from exc
    return parsed.model_dump(exclude_unset=True)


def create_app(
    *,
    catalog_uc: CatalogUseCase,
    quote_uc: QuoteUseCase,
    place_order_uc: PlaceOrderUseCase,
    get_order_uc: GetOrderUseCase,
    list_orders_uc: ListOrdersUseCase,
    authenticator: AdminAuthenticator,
    currency: str = "GBP",
) -> FastAPI:
    app = FastAPI(title="plate_configurator")

    # --- exception handlers ----------------------------------------------------

    @app.exception_handler(ConfiguratorError)
    async def handle_domain_error(_: Request, exc: ConfiguratorError) -> JSONResponse:
        status, body = _map_error_to_http(exc)
        if status >= 500:
            logger.error("request failed: %s", exc)
        headers = {"WWW-Authenticate": "Bearer"} if status == 401 else None
        return JSONResponse(status_code=status, content=body.model_dump(), headers=headers)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        body = ErrorResponse(
            type="RequestValidationError",
            message="invalid request",
            details=jsonable_encoder(exc.errors()),
        )
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        body = ErrorResponse(type=type(exc).__name__, message="internal server error")
        return JSONResponse(status_code=500, content=body.model_dump())

    # --- admin gate ------------------------------------------------------------

    def require_admin(authorization: str | None = Header(None)) -> None:
        result = authenticator.authenticate(_bearer_token(authorization))
        if isinstance(result, Failure):
            raise result.failure()

    public = APIRouter(prefix="/api", responses=_ERROR_RESPONSES)
    admin = APIRouter(
        prefix="/api/admin",
        dependencies=[Depends(require_admin)],
        responses={**_ERROR_RESPONSES, 401: {"model": ErrorResponse}},
    )

    # --- shared handlers -------------------------------------------------------

    def list_kind(kind: OptionKind) -> list[dict[str, Any]]:
        result = catalog_uc.list_options(kind)
        if isinstance(result, Success):
            return [option_to_wire(kind, opt) for opt in result.unwrap()]
        raise result.failure()

    # --- public routes ---------------------------------------------------------

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @public.get("/options/{kind}")
    def list_options(kind: OptionKind) -> Any:
        return list_kind(kind)

    @public.post("/quote", response_model=QuoteResponse)
    def quote(req: QuoteRequest) -> Any:
        result = quote_uc.quote(to_customization(req.customization))
        if isinstance(result, Success):
            q = result.unwrap()
            return QuoteResponse(
                order_items=items_to_wire(q.items), total_price=q.total, currency=currency
            )
        raise result.failure()

    @public.post(
        "/orders",
        response_model=CreateOrderResponse,
        status_code=201,
        responses={503: {"model": ErrorResponse}},
    )
    def create_order(req: CreateOrderRequest, response: Response) -> Any:
        payment = req.payment_data
        cmd = PlaceOrderCommand(
            customization=to_customization(req.customization),
            submitted_items=None if req.order_items is None else to_items(req.order_items),
            submitted_total=req.total_price,
            payment_status=payment.status if payment is not None else None,
            payment_id=payment.payment_id if payment is not None else None,
        )

        result = place_order_uc.place_order(cmd)

        if isinstance(result, Success):
            receipt = result.unwrap()
            response.headers["Location"] = f"/api/orders/{receipt.order_id}"
            return CreateOrderResponse(
                success=True,
                order_id=receipt.order_id,
                message="Order created successfully",
            )

        raise result.failure()

    @public.get(
        "/orders/{order_id}",
        response_model=OrderOut,
        responses={404: {"model": ErrorResponse}},
    )
    def get_order(order_id: str) -> Any:
        result = get_order_uc.get_order(GetOrderQuery(order_id=_order_id(order_id)))
        if isinstance(result, Success):
            return order_to_wire(result.unwrap())
        raise result.failure()

    # --- admin routes ----------------------------------------------------------

    @admin.get("/orders", response_model=list[OrderOut])
    def list_orders(search: str | None = Query(None)) -> Any:
        result = list_orders_uc.list_orders(ListOrdersQuery(search=search))
        if isinstance(result, Success):
            return [order_to_wire(o) for o in result.unwrap()]
        raise result.failure()

    @admin.get("/orders/summary", response_model=OrderSummaryResponse)
    def summarize_orders(latest: int = Query(5, ge=1, le=100)) -> Any:
        result = list_orders_uc.summarize(OrderSummaryQuery(latest=latest))
        if isinstance(result, Success):
            view = result.unwrap()
            return OrderSummaryResponse(
                total_orders=view.total_orders,
                counts_by_status={s.value: n for s, n in view.counts_by_status.items()},
                revenue=view.revenue,
                latest=[order_to_wire(o) for o in view.latest],
            )
        raise result.failure()

    @admin.get("/options/{kind}")
    def admin_list_options(kind: OptionKind) -> Any:
        return list_kind(kind)

    @admin.post("/options/{kind}", status_code=201, responses={409: {"model": ErrorResponse}})
    def create_option(kind: OptionKind, payload: dict[str, Any] = Body(...)) -> Any:
        fields = _parse(OPTION_SCHEMAS[kind].create, payload)
        result = catalog_uc.create_option(kind, fields)
        if isinstance(result, Success):
            return option_to_wire(kind, result.unwrap())
        raise result.failure()

    @admin.patch(
        "/options/{kind}/{option_id}",
        responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    )
    def update_option(
        kind: OptionKind, option_id: int, payload: dict[str, Any] = Body(...)
    ) -> Any:
        changes = _parse(OPTION_SCHEMAS[kind].patch, payload)
        result = catalog_uc.update_option(kind, option_id, changes)
        if isinstance(result, Success):
            return option_to_wire(kind, result.unwrap())
        raise result.failure()

    app.include_router(public)
    app.include_router(admin)
    return app

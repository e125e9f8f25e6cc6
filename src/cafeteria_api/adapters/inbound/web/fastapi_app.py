from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from fastapi import FastAPI, Header, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from returns.result import Success

from cafeteria_api.core.domain.model.errors import (
    CafeError,
    EmptyCart,
    InsufficientStock,
    NotFound,
    PublishError,
    ValidationError,
)
from cafeteria_api.core.domain.model.order import Order, now_utc
from cafeteria_api.core.domain.model.product import Money, Product
from cafeteria_api.core.ports.inbound.cart import (
    DEFAULT_CART_SESSION,
    AddItemCommand,
    CartUseCase,
    CartView,
    RemoveItemCommand,
    UpdateQuantityCommand,
)
from cafeteria_api.core.ports.inbound.catalog import (
    CatalogUseCase,
    GetProductQuery,
    ListProductsQuery,
)
from cafeteria_api.core.ports.inbound.checkout import CheckoutCommand, CheckoutUseCase

logger = logging.getLogger(__name__)

# ---- HTTP DTOs (adapter layer) ---------------------------------------------


class AddItemRequest(BaseModel):
    produtoId: int = Field(examples=[4])
    quantidade: int = Field(1, ge=1, examples=[2])


class UpdateQuantityRequest(BaseModel):
    quantidade: int = Field(
        description="New quantity for the line; zero or less removes it",
        examples=[3],
    )


class CheckoutRequest(BaseModel):
    dadosCliente: Any = None


class ProductOut(BaseModel):
    id: int
    nome: str
    descricao: str
    preco: float
    categoria: str
    imagem: str
    estoque: int


class CartLineOut(BaseModel):
    produtoId: int
    quantidade: int
    produto: ProductOut


class CartLineWithSubtotalOut(CartLineOut):
    subtotal: float


class OrderOut(BaseModel):
    id: int
    data: str
    itens: list[CartLineOut]
    total: float
    status: str
    dadosCliente: Any


class ProductListResponse(BaseModel):
    success: bool = True
    data: list[ProductOut]
    total: int


class ProductResponse(BaseModel):
    success: bool = True
    data: ProductOut


class CategoryListResponse(BaseModel):
    success: bool = True
    data: list[str]


class CartMutationResponse(BaseModel):
    success: bool = True
    message: str
    data: list[CartLineOut]


class CartListResponse(BaseModel):
    success: bool = True
    data: list[CartLineWithSubtotalOut]
    total: float


class CheckoutResponse(BaseModel):
    success: bool = True
    message: str
    data: OrderOut


class LivenessResponse(BaseModel):
    success: bool = True
    message: str
    timestamp: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: str


# ---- Mapping helpers -------------------------------------------------------


def _iso(at: datetime) -> str:
    return at.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _amount(money: Money) -> float:
    return float(money.amount)


def _product_out(p: Product) -> ProductOut:
    return ProductOut(
        id=p.product_id.value,
        nome=p.name,
        descricao=p.description,
        preco=_amount(p.price),
        categoria=p.category,
        imagem=p.image_ref,
        estoque=p.stock,
    )


def _cart_lines_out(view: CartView) -> list[CartLineOut]:
    return [
        CartLineOut(
            produtoId=ln.product_id.value,
            quantidade=ln.quantity,
            produto=_product_out(ln.product),
        )
        for ln in view.lines
    ]


def _order_out(order: Order) -> OrderOut:
    return OrderOut(
        id=order.order_id.value,
        data=_iso(order.created_at),
        itens=[
            CartLineOut(
                produtoId=ln.product_id.value,
                quantidade=ln.quantity,
                produto=_product_out(ln.product),
            )
            for ln in order.lines
        ],
        total=_amount(order.total()),
        status=order.status.value,
        dadosCliente=order.customer_info,
    )


def _map_error_to_http(err: CafeError) -> tuple[int, ErrorResponse]:
    if isinstance(err, ValidationError):
        return 400, ErrorResponse(message=err.message)

    if isinstance(err, NotFound):
        return 404, ErrorResponse(message=err.message)

    if isinstance(err, (InsufficientStock, EmptyCart)):
        return 400, ErrorResponse(message=err.message)

    if isinstance(err, PublishError):
        return 503, ErrorResponse(message=err.message)

    return 500, ErrorResponse(message=err.message)


def _session(value: str | None) -> str:
    return value.strip() if value and value.strip() else DEFAULT_CART_SESSION


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def create_app(
    catalog_uc: CatalogUseCase,
    cart_uc: CartUseCase,
    checkout_uc: CheckoutUseCase,
) -> FastAPI:
    app = FastAPI(title="cafeteria_api")
    # the storefront front end is served from other origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --- exception handlers ---------------------------------------------------

    @app.exception_handler(CafeError)
    async def handle_domain_error(_: Request, exc: CafeError) -> JSONResponse:
        status, body = _map_error_to_http(exc)
        logger.info("request failed: %s -> %d", exc, status)
        return JSONResponse(status_code=status, content=body.model_dump())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        body = ErrorResponse(message="invalid request")
        return JSONResponse(status_code=400, content=body.model_dump())

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "unhandled error on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        body = ErrorResponse(message="internal server error")
        return JSONResponse(status_code=500, content=body.model_dump())

    # --- catalog --------------------------------------------------------------

    @app.get("/api/produtos", response_model=ProductListResponse)
    def list_products(categoria: str | None = Query(None)) -> Any:
        result = catalog_uc.list_products(ListProductsQuery(category=categoria))
        if isinstance(result, Success):
            products = result.unwrap()
            return ProductListResponse(
                data=[_product_out(p) for p in products], total=len(products)
            )
        raise result.failure()

    @app.get(
        "/api/produtos/{product_id}",
        response_model=ProductResponse,
        responses=ERROR_RESPONSES,
    )
    def get_product(product_id: int) -> Any:
        result = catalog_uc.get_product(GetProductQuery(product_id=product_id))
        if isinstance(result, Success):
            return ProductResponse(data=_product_out(result.unwrap()))
        raise result.failure()

    @app.get("/api/categorias", response_model=CategoryListResponse)
    def list_categories() -> Any:
        result = catalog_uc.list_categories()
        if isinstance(result, Success):
            return CategoryListResponse(data=list(result.unwrap()))
        raise result.failure()

    # --- cart -----------------------------------------------------------------

    @app.post(
        "/api/carrinho",
        response_model=CartMutationResponse,
        responses=ERROR_RESPONSES,
    )
    def add_item(
        req: AddItemRequest,
        x_cart_session: str | None = Header(None, alias="X-Cart-Session"),
    ) -> Any:
        result = cart_uc.add_item(
            AddItemCommand(
                product_id=req.produtoId,
                quantity=req.quantidade,
                session_id=_session(x_cart_session),
            )
        )
        if isinstance(result, Success):
            return CartMutationResponse(
                message="Item adicionado ao carrinho",
                data=_cart_lines_out(result.unwrap()),
            )
        raise result.failure()

    @app.get("/api/carrinho", response_model=CartListResponse)
    def list_cart(
        x_cart_session: str | None = Header(None, alias="X-Cart-Session"),
    ) -> Any:
        result = cart_uc.list_items(_session(x_cart_session))
        if isinstance(result, Success):
            view = result.unwrap()
            return CartListResponse(
                data=[
                    CartLineWithSubtotalOut(
                        produtoId=ln.product_id.value,
                        quantidade=ln.quantity,
                        produto=_product_out(ln.product),
                        subtotal=_amount(ln.subtotal),
                    )
                    for ln in view.lines
                ],
                total=_amount(view.total),
            )
        raise result.failure()

    @app.put(
        "/api/carrinho/{product_id}",
        response_model=CartMutationResponse,
        responses=ERROR_RESPONSES,
    )
    def update_quantity(
        product_id: int,
        req: UpdateQuantityRequest,
        x_cart_session: str | None = Header(None, alias="X-Cart-Session"),
    ) -> Any:
        result = cart_uc.update_quantity(
            UpdateQuantityCommand(
                product_id=product_id,
                quantity=req.quantidade,
                session_id=_session(x_cart_session),
            )
        )
        if isinstance(result, Success):
            return CartMutationResponse(
                message="Carrinho atualizado", data=_cart_lines_out(result.unwrap())
            )
        raise result.failure()

    @app.delete(
        "/api/carrinho/{product_id}",
        response_model=CartMutationResponse,
        responses=ERROR_RESPONSES,
    )
    def remove_item(
        product_id: int,
        x_cart_session: str | None = Header(None, alias="X-Cart-Session"),
    ) -> Any:
        result = cart_uc.remove_item(
            RemoveItemCommand(
                product_id=product_id, session_id=_session(x_cart_session)
            )
        )
        if isinstance(result, Success):
            return CartMutationResponse(
                message="Item removido do carrinho",
                data=_cart_lines_out(result.unwrap()),
            )
        raise result.failure()

    # --- checkout -------------------------------------------------------------

    @app.post(
        "/api/checkout",
        response_model=CheckoutResponse,
        responses={**ERROR_RESPONSES, 503: {"model": ErrorResponse}},
    )
    def checkout(
        req: CheckoutRequest | None = None,
        x_cart_session: str | None = Header(None, alias="X-Cart-Session"),
    ) -> Any:
        result = checkout_uc.checkout(
            CheckoutCommand(
                customer_info=req.dadosCliente if req is not None else None,
                session_id=_session(x_cart_session),
            )
        )
        if isinstance(result, Success):
            return CheckoutResponse(
                message="Pedido realizado com sucesso!",
                data=_order_out(result.unwrap()),
            )
        raise result.failure()

    # --- liveness -------------------------------------------------------------

    @app.get("/api/test", response_model=LivenessResponse)
    def liveness() -> Any:
        return LivenessResponse(
            message="API da Cafeteria funcionando!", timestamp=_iso(now_utc())
        )

    return app

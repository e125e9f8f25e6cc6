from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from fastapi import FastAPI

from cafeteria_api.adapters.inbound.web.fastapi_app import create_app
from cafeteria_api.adapters.outbound.in_memory_carts import InMemoryCartStore
from cafeteria_api.adapters.outbound.in_memory_catalog import InMemoryProductCatalog
from cafeteria_api.adapters.outbound.logging_events import LoggingEventPublisher
from cafeteria_api.adapters.outbound.seed_catalog import DEFAULT_PRODUCTS
from cafeteria_api.core.domain.model.product import Product
from cafeteria_api.core.domain.service.cart_service import CartDeps, CartService
from cafeteria_api.core.domain.service.catalog_service import (
    CatalogDeps,
    CatalogService,
)
from cafeteria_api.core.domain.service.checkout_service import (
    CheckoutDeps,
    CheckoutService,
)
from cafeteria_api.core.ports.outbound.events import EventPublisher


@dataclass(frozen=True)
class UseCases:
    catalog: CatalogService
    cart: CartService
    checkout: CheckoutService


def build_usecases(
    products: Iterable[Product] = DEFAULT_PRODUCTS,
    events: EventPublisher | None = None,
) -> UseCases:
    catalog = InMemoryProductCatalog.of(products)
    carts = InMemoryCartStore()
    publisher = events if events is not None else LoggingEventPublisher()

    return UseCases(
        catalog=CatalogService(CatalogDeps(catalog=catalog)),
        cart=CartService(CartDeps(catalog=catalog, carts=carts)),
        checkout=CheckoutService(CheckoutDeps(carts=carts, events=publisher)),
    )


def build_app(usecases: UseCases | None = None) -> FastAPI:
    uc = usecases or build_usecases()
    return create_app(uc.catalog, uc.cart, uc.checkout)

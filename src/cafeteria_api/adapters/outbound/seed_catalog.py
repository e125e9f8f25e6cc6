from __future__ import annotations

from typing import Tuple

from cafeteria_api.core.domain.model.product import Money, Product, ProductId

DEFAULT_PRODUCTS: Tuple[Product, ...] = (
    Product(
        product_id=ProductId(1),
        name="Café com Canela Cremoso",
        description=(
            "Um delicioso café cremoso, aromatizado com canela e servido com um "
            "pau de canela para um toque especial."
        ),
        price=Money.of("18.00"),
        category="bebidas",
        image_ref="cafe-canela-cremoso.jpeg",
        stock=25,
    ),
    Product(
        product_id=ProductId(2),
        name="Mocha Gelado",
        description=(
            "Mocha gelado com café espresso, leite vaporizado, chantilly e calda "
            "de chocolate, servido com gelo."
        ),
        price=Money.of("16.50"),
        category="bebidas",
        image_ref="Mocha-Gelado.jpeg",
        stock=30,
    ),
    Product(
        product_id=ProductId(3),
        name="Chocolate Quente Cremoso",
        description=(
            "Delicioso chocolate quente cremoso, coberto com chantilly e raspas "
            "de chocolate."
        ),
        price=Money.of("18.50"),
        category="bebidas",
        image_ref="chocolate-quente-cremoso.jpeg",
        stock=20,
    ),
    Product(
        product_id=ProductId(4),
        name="Esfihas fechadas",
        description=(
            "Esfihas fechadas com massa folhada, recheio de carne moída, queijo e "
            "molho de tomate, servidas em 3 unidades."
        ),
        price=Money.of("8.50"),
        category="salgados",
        image_ref="Esfihas-fechadas.jpeg",
        stock=25,
    ),
)

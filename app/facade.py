from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from domain.models import Identifier, Money, Order, Product, UserDTO
from domain.services import OrderService, ProductService, UserService


@dataclass(frozen=True)
class UserView:
    id: Identifier | None
    display_name: str
    email: str


@dataclass(frozen=True)
class OrderView:
    id: Identifier | None
    total: str
    items: Sequence[str]


class ApplicationFacade:
    """
    UI-facing facade over users, products and orders.
    """

    def __init__(
        self,
        *,
        user_service: UserService,
        product_service: ProductService,
        order_service: OrderService,
    ) -> None:
        self._users = user_service
        self._products = product_service
        self._orders = order_service

    def register_user(self, first_name: str, last_name: str, email: str) -> UserView:
        dto = self._users.register_user(
            UserDTO(first_name=first_name, last_name=last_name, email=email),
        )
        return self._user_view(dto)

    def list_users(self) -> Sequence[UserView]:
        return [self._user_view(u) for u in self._users.get_all_users()]

    def add_product(self, name: str, price: float) -> Product:
        return self._products.save(Product(name=name, price=price))

    def list_products(self) -> Sequence[Product]:
        return self._products.find_all()

    def place_order(self, items: Sequence[str], amount: float, currency: str) -> OrderView:
        order = self._orders.place_order(
            Order(total=Money(amount=amount, currency=currency), items=tuple(items)),
        )
        return self._order_view(order)

    def list_orders(self) -> Sequence[OrderView]:
        return [self._order_view(o) for o in self._orders.list_orders()]

    @staticmethod
    def _user_view(dto: UserDTO) -> UserView:
        display_name = f"{dto.first_name} {dto.last_name}".strip()
        return UserView(id=dto.id, display_name=display_name, email=dto.email)

    @staticmethod
    def _order_view(order: Order) -> OrderView:
        return OrderView(id=order.id, total=str(order.total), items=tuple(order.items))

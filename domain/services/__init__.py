"""
Domain services.

These services orchestrate higher-level workflows while depending only on
domain models and ports so that infrastructure and UI layers can remain thin.
"""

from .orders import OrderService
from .products import ProductService
from .users import UserMapper, UserService

__all__ = [
    "UserMapper",
    "UserService",
    "ProductService",
    "OrderService",
]

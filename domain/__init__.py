"""
Domain layer package.

This package contains pure models, errors and ports that are
independent of any specific storage backend or framework.
"""

from .errors import DuplicateKeyError, EntityStoreError, NotFoundError  # noqa: F401
from .models import (  # noqa: F401
    Identifier,
    Money,
    Order,
    Product,
    Record,
    Scalar,
    StoreConfig,
    UserDTO,
)
from .ports import (  # noqa: F401
    ConfigProviderPort,
    EntityStorePort,
    IdGeneratorPort,
    LoggerPort,
    OrderFulfilmentPort,
)

__all__ = [
    # Models
    "Identifier",
    "Scalar",
    "Record",
    "Money",
    "UserDTO",
    "Product",
    "Order",
    "StoreConfig",
    # Errors
    "EntityStoreError",
    "NotFoundError",
    "DuplicateKeyError",
    # Ports
    "EntityStorePort",
    "IdGeneratorPort",
    "LoggerPort",
    "OrderFulfilmentPort",
    "ConfigProviderPort",
]

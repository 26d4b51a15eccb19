"""Application/UI layer package."""

from .facade import ApplicationFacade, OrderView, UserView

__all__ = ["ApplicationFacade", "OrderView", "UserView"]

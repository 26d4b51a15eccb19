from .id_generators import SequentialIdGenerator, UuidIdGenerator
from .logging_order_fulfilment import LoggingOrderFulfilment
from .structured_logger import StructuredLogger

__all__ = [
    "SequentialIdGenerator",
    "UuidIdGenerator",
    "StructuredLogger",
    "LoggingOrderFulfilment",
]

"""
Reusable fakes for tests.
"""

from .fake_config_provider import InMemoryConfigProvider
from .fake_runtime import FixedIdGenerator, InMemoryLogger, RecordingOrderFulfilment

__all__ = [
    "InMemoryConfigProvider",
    "FixedIdGenerator",
    "InMemoryLogger",
    "RecordingOrderFulfilment",
]

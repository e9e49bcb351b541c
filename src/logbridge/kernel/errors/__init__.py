"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError         (application.py)
        └── ArgumentMissingError
"""

from logbridge.kernel.errors.application import ApplicationError, ArgumentMissingError
from logbridge.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "ArgumentMissingError",
    "BaseError",
]

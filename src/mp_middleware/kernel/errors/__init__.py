"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError         (application.py)
        ├── DispatchError        (dispatch.py)
        │   ├── InvalidHandlerError
        │   └── ContractViolationError
        └── ConfigError          (mp_middleware.config.validation)
"""

from mp_middleware.kernel.errors.application import ApplicationError
from mp_middleware.kernel.errors.base import BaseError
from mp_middleware.kernel.errors.dispatch import (
    ContractViolationError,
    DispatchError,
    InvalidHandlerError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ContractViolationError",
    "DispatchError",
    "InvalidHandlerError",
]

"""Base exceptions for domain-kernel.

This module defines the root of the exception hierarchy for the
domain-kernel library. All exceptions inherit from KernelError and
carry an error code and a details dictionary.
"""

from typing import Any, Dict, Optional


class KernelError(Exception):
    """Base exception for all domain-kernel errors.

    All exceptions in the domain-kernel library inherit from this base class
    and include structured error information for callers that report them.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

"""Outcome types and error handling for retrycase.

- Result/Ok/Err: success-or-failure outcome of operations and retry calls
- catching: adapt exception-raising callables into operations
- ErrorCode/RetryException/InvalidArgumentError: library misuse
- RetryCanceled: canceled terminal outcome
"""

from .errors import ErrorCode, InvalidArgumentError, RetryCanceled, RetryException
from .result import Err, Ok, Result, catching

__all__ = [
    # Result monad
    "Result", "Ok", "Err", "catching",
    # Errors
    "ErrorCode", "RetryException", "InvalidArgumentError", "RetryCanceled",
]

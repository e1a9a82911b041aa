"""Common components shared by the walker implementation.

This internal package contains non-I/O code: configuration, result records
and exceptions. It should NOT be imported directly by users.

Important: This package must NEVER import from aio to avoid circular
dependencies.
"""

from ..config import Step, WalkParams
from ..exceptions import (
    WalkError,
    NodeResolutionError,
    NodeListingError,
    NodeCheckError,
    UnknownStepError,
    WalkerStateError,
)
from .results import WalkResult, ResultBuffer, sort_results

__all__ = [
    'Step',
    'WalkParams',
    'WalkError',
    'NodeResolutionError',
    'NodeListingError',
    'NodeCheckError',
    'UnknownStepError',
    'WalkerStateError',
    'WalkResult',
    'ResultBuffer',
    'sort_results',
]

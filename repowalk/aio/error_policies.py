"""
Error handling policies for repowalk.

The walker never cancels running units when something fails. Instead every
error is handed to a policy, and the policy decides which error (if any)
walk() raises once all units have drained.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors
    reported by traversal units.
    """

    @abstractmethod
    def handle(self, error: Exception, stage: str, path: Optional[str]) -> None:
        """
        Handle an error that occurred while walking a node.

        Args:
            error: The exception that was raised
            stage: Name of the operation that failed (e.g., 'list_children')
            path: Path of the node being processed, if known
        """
        pass

    @property
    @abstractmethod
    def first_error(self) -> Optional[Exception]:
        """The error walk() should raise, or None."""
        pass


def _error_record(error: Exception, stage: str, path: Optional[str]) -> Dict[str, Any]:
    return {
        'path': path,
        'stage': stage,
        'error': error,
        'error_type': type(error).__name__,
        'error_message': str(error),
    }


class FirstErrorPolicy(ErrorPolicy):
    """
    Policy that keeps the first error and drops every later one.

    This is the default behavior: walk() raises the first error reported
    by any unit, after all units have finished.
    """

    def __init__(self):
        self._error: Optional[Exception] = None

    def handle(self, error: Exception, stage: str, path: Optional[str]) -> None:
        if self._error is None:
            self._error = error

    @property
    def first_error(self) -> Optional[Exception]:
        return self._error


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that records every error, for batch reporting.

    walk() still raises the first error, but all of them remain available
    for inspection afterwards.
    """

    def __init__(self):
        """Initialize the policy."""
        self.errors: List[Dict[str, Any]] = []

    def handle(self, error: Exception, stage: str, path: Optional[str]) -> None:
        self.errors.append(_error_record(error, stage, path))

    @property
    def first_error(self) -> Optional[Exception]:
        return self.errors[0]['error'] if self.errors else None


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that logs errors and lets the walk succeed.

    Errors are collected for later inspection and walk() returns normally
    with the results of every subtree that could be processed.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, log a warning for every error
        """
        self.errors: List[Dict[str, Any]] = []
        self.skipped_paths: List[str] = []
        self.verbose = verbose

    def handle(self, error: Exception, stage: str, path: Optional[str]) -> None:
        self.errors.append(_error_record(error, stage, path))

        if isinstance(error, OSError) or stage in ('canonical_path', 'list_children'):
            if path:
                self.skipped_paths.append(path)

        if self.verbose:
            if isinstance(error, PermissionError):
                logger.warning("Skipping inaccessible path '%s': %s", path, error)
            else:
                logger.warning("Error in %s for '%s': %s", stage, path, error)

    @property
    def first_error(self) -> Optional[Exception]:
        return None

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'permission_errors': sum(1 for e in self.errors if e['error_type'] == 'PermissionError'),
            'skipped_paths': len(self.skipped_paths),
            'errors': self.errors,
        }

"""Exception types raised by repowalk.

Ordinary runtime failures derive from WalkError and flow through the
walker's error policy. WalkerStateError signals misuse of a Walker and is
never captured by a policy.
"""

from typing import Any


class WalkError(Exception):
    """Base class for errors raised while walking a tree."""


class NodeResolutionError(WalkError):
    """The canonical path of a node could not be determined."""

    def __init__(self, path: str, message: str = "failed to resolve path"):
        super().__init__(f"{message}: {path}")
        self.path = path


class NodeListingError(WalkError):
    """The children of a node could not be listed."""

    def __init__(self, path: str, message: str = "failed to read directory"):
        super().__init__(f"{message}: {path}")
        self.path = path


class NodeCheckError(WalkError):
    """An entry could not be checked for being a descendable node."""

    def __init__(self, path: str, message: str = "failed to check directory"):
        super().__init__(f"{message}: {path}")
        self.path = path


class UnknownStepError(WalkError):
    """A strategy returned something that is not a Step."""

    def __init__(self, step: Any):
        super().__init__(f"decide_child returned unknown step: {step!r}")
        self.step = step


class WalkerStateError(RuntimeError):
    """A Walker was used outside of its lifecycle.

    Raised when walk() is called twice, or when results are requested
    before walk() has returned.
    """

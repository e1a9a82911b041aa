"""Core abstractions for async tree walking.

This module defines the node capability the walker consumes, the strategy
contract, and the walker engine together with its shared bookkeeping.
"""

from .node import AsyncWalkNode
from .record import VisitedRecord
from .gate import ConcurrencyGate
from .context import WalkContext, ContextPool
from .strategy import WalkStrategy
from .walker import Walker

__all__ = [
    # Node
    'AsyncWalkNode',
    # Bookkeeping
    'VisitedRecord',
    'ConcurrencyGate',
    'WalkContext',
    'ContextPool',
    # Strategy
    'WalkStrategy',
    # Walker
    'Walker',
]

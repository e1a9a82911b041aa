"""Asynchronous implementation of repowalk.

Every traversal unit is an asyncio task; filesystem I/O runs in worker
threads so many directories are processed concurrently.
"""

# Core abstractions
from .core import (
    AsyncWalkNode,
    VisitedRecord,
    ConcurrencyGate,
    WalkContext,
    ContextPool,
    WalkStrategy,
    Walker,
)

# Nodes
from .adapters import AsyncFileSystemNode, is_directory

# Strategies
from .strategies import Scan, ScoredScan, Sweep, scan_match

# Error policies
from .error_policies import (
    ErrorPolicy,
    FirstErrorPolicy,
    CollectErrorsPolicy,
    ContinueOnErrorsPolicy,
)

# High-level API
from .api import as_node, scan, scan_scores, sweep

# Configuration (re-exported from _common)
from .._common import Step, WalkParams

__all__ = [
    # Core abstractions
    'AsyncWalkNode',
    'VisitedRecord',
    'ConcurrencyGate',
    'WalkContext',
    'ContextPool',
    'WalkStrategy',
    'Walker',
    # Nodes
    'AsyncFileSystemNode',
    'is_directory',
    # Strategies
    'Scan',
    'ScoredScan',
    'Sweep',
    'scan_match',
    # Error policies
    'ErrorPolicy',
    'FirstErrorPolicy',
    'CollectErrorsPolicy',
    'ContinueOnErrorsPolicy',
    # Configuration
    'Step',
    'WalkParams',
    # High-level API
    'as_node',
    'scan',
    'scan_scores',
    'sweep',
]

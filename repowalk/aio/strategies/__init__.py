"""Built-in walk strategies."""

from .scan import Scan, ScoredScan, scan_match
from .sweep import Sweep

__all__ = [
    'Scan',
    'ScoredScan',
    'scan_match',
    'Sweep',
]

"""Synchronous API for repowalk.

Blocking wrappers around repowalk.aio.api for callers that do not run an
event loop themselves. They must not be called from inside a running loop;
use the async functions there instead.
"""

import asyncio
from typing import List, Tuple

from .aio import api as _aio_api


def scan_tree(root, match=None, **kwargs) -> List[str]:
    """Blocking version of repowalk.aio.scan.

    Example:
        >>> for path in scan_tree("/srv/git"):
        ...     print(path)
    """
    return asyncio.run(_aio_api.scan(root, match, **kwargs))


def scan_tree_scores(root, match=None, **kwargs) -> Tuple[List[str], List[float]]:
    """Blocking version of repowalk.aio.scan_scores."""
    return asyncio.run(_aio_api.scan_scores(root, match, **kwargs))


def sweep_tree(root, stop=None, **kwargs) -> List[str]:
    """Blocking version of repowalk.aio.sweep.

    The output order allows removing every returned directory one by one,
    e.g. with os.rmdir.
    """
    return asyncio.run(_aio_api.sweep(root, stop, **kwargs))

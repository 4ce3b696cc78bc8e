"""Worker pool and asyncio bridge behind the async runners.

The modules mirror the naming of `concurrent.futures` and `asyncio`
components so the runners read like the stdlib they build on.
"""

from . import async_bridge, threading

__all__ = [
    "async_bridge",
    "threading",
]

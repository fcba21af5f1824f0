"""Provides :func:`cache_array_result`."""
from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache, wraps
from typing import Any

import numpy as np


def cache_array_result(
    *,
    maxsize: int | None = 128,
    copy: bool = True,
) -> Callable[[Callable[..., np.ndarray]], Callable[..., np.ndarray]]:
    """Creates a decorator caching array results of functions with hashable arguments.

    The cached arrays are marked read-only; callers receive a copy unless
    ``copy`` is ``False``.

    Args:
        maxsize: The size of the cache.
        copy: A flag that, when set to ``True``, causes the wrapper to hand
            out a writable copy of the cached array.

    Returns:
        A decorator. The decorated function exposes ``cache_info`` and
        ``cache_clear`` like :func:`functools.lru_cache`.
    """
    def decorator(function: Callable[..., np.ndarray]) -> Callable[..., np.ndarray]:
        @lru_cache(maxsize=maxsize)
        def cached_wrapper(*args: Any, **kwargs: Any) -> np.ndarray:
            arr = np.asarray(function(*args, **kwargs), dtype=float)
            arr.setflags(write=False)
            return arr

        @wraps(function)
        def wrapped(*args: Any, **kwargs: Any) -> np.ndarray:
            arr = cached_wrapper(*args, **kwargs)
            return arr.copy() if copy else arr

        # Ensure that the lru_cache attributes are preserved.
        wrapped.cache_info = cached_wrapper.cache_info
        wrapped.cache_clear = cached_wrapper.cache_clear
        return wrapped

    return decorator

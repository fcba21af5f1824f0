"""Provides the SmoothingKit API.

This class is a lightweight front end over SmoothKit's smoothing engines.
You provide the signal, then choose an engine by name (e.g.,
``"savitzky_golay"`` or ``"moving_average"``).

Adding methods
--------------
New engines can be registered without modifying this class by calling
``register_method`` (see example below).

Examples:
    Basic usage:

        >>> import numpy as np
        >>> from smoothkit.smoothing_kit import SmoothingKit
        >>> sk = SmoothingKit(np.arange(10.0))
        >>> y = sk.smooth(method="sg", half_window_size=2, polynomial_order=2)
        >>> bool(np.allclose(y, np.arange(10.0)))
        True

    Registering a new method:

        >>> from smoothkit.smoothing_kit import register_method
        >>> from smoothkit.some_new_method import NewSmoother  # doctest: +SKIP
        >>> register_method(
        ...     name="new-method",
        ...     cls=NewSmoother,
        ...     aliases=("new_method", "nm"),
        ... )  # doctest: +SKIP

Notes:
    - Method names are case/spacing/punctuation insensitive; aliases like
      ``"SavitzkyGolay"`` or ``"moving-average"`` are supported when
      registered.
    - For available canonical method names at runtime, call
      ``available_methods()``.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Iterable, Mapping, Protocol, Type

from numpy.typing import ArrayLike

from smoothkit.moving_average.moving_average import MovingAverageSmoother
from smoothkit.savitzky_golay.savitzky_golay import SavitzkyGolaySmoother
from smoothkit.utils.validate import validate_signal


class SmoothingEngine(Protocol):
    """Protocol each smoothing engine must satisfy.

    Any class registered as a smoothing engine must be constructible with the
    signal and must provide a ``.smooth(...)`` method returning the smoothed
    signal. It serves only as a structural type check and carries no runtime
    behavior.
    """
    def __init__(self, signal: ArrayLike):
        """Initialize the engine with a signal."""
        ...
    def smooth(self, *args: Any, **kwargs: Any) -> Any:
        """Compute the smoothed signal using the engine's algorithm."""
        ...


# Built-in methods; the aliases mirror the names used by spectrum-processing
# packages (``method="SavitzkyGolay"`` / ``"MovingAverage"``).
_METHOD_SPECS: list[tuple[str, Type[SmoothingEngine], list[str]]] = [
    ("savitzky_golay", SavitzkyGolaySmoother, ["savitzky-golay", "savgol", "sg"]),
    ("moving_average", MovingAverageSmoother, ["moving-average", "ma"]),
]


def _norm(s: str) -> str:
    """Normalize a method string for robust matching (case/spacing/punct insensitive).

    Args:
        s: Input string.

    Returns:
        Normalized string.
    """
    return re.sub(r"[^a-z0-9]+", "", s.lower())


@lru_cache(maxsize=1)
def _method_maps() -> tuple[Mapping[str, Type[SmoothingEngine]], tuple[str, ...]]:
    """Construct and cache lookup tables for smoothing methods.

    Returns:
        A pair ``(method_map, canonical_names)`` where ``method_map`` maps
        normalized names and aliases to engine classes and
        ``canonical_names`` lists the sorted canonical method names.
    """
    method_map: dict[str, Type[SmoothingEngine]] = {}
    canonical: set[str] = set()
    for name, cls, aliases in _METHOD_SPECS:
        k = _norm(name)
        method_map[k] = cls
        canonical.add(name)
        for a in aliases:
            method_map[_norm(a)] = cls
    return method_map, tuple(sorted(canonical))


def register_method(
    name: str,
    cls: Type[SmoothingEngine],
    *,
    aliases: Iterable[str] = (),
) -> None:
    """Register a new smoothing method.

    Adds a new smoothing engine that can be referenced by name in
    :class:`SmoothingKit`. The internal lookup cache is cleared and rebuilt
    on the next lookup.

    Args:
        name: Canonical public name of the method (e.g., "median").
        cls: Engine class implementing the SmoothingEngine protocol.
        aliases: Additional accepted spellings (e.g., "running-median").
    """
    _METHOD_SPECS.append((name, cls, list(aliases)))
    _method_maps.cache_clear()


def _resolve(method: str) -> Type[SmoothingEngine]:
    """Resolve a user-provided method name or alias to an engine class.

    Args:
        method: User-provided method name or alias.

    Returns:
        Corresponding smoothing engine class.

    Raises:
        ValueError: If ``method`` is not registered.
    """
    method_map, canon = _method_maps()
    try:
        return method_map[_norm(method)]
    except KeyError:
        opts = ", ".join(canon)
        raise ValueError(f"Unknown smoothing method '{method}'. Choose one of {{{opts}}}.") from None


class SmoothingKit:
    """Unified interface for smoothing a signal.

    By default, the Savitzky-Golay method is used.

    Attributes:
        signal: The signal to smooth, as a float array.
        default_method: The engine used when no method is specified.
    """

    def __init__(self, signal: ArrayLike):
        """Initializes the SmoothingKit with a signal.

        Args:
            signal: Samples of shape ``(n,)`` or ``(n, c)``.
        """
        self.signal = validate_signal(signal)
        self.default_method = "savitzky_golay"

    def smooth(self,
               *,
               method: str | None = None,
               **kwargs: Any) -> Any:
        """Smooth the signal with the chosen method.

        Forwards all keyword arguments to the engine's ``.smooth()``.

        Args:
            method: Method name or alias (e.g., "savitzky_golay", "sg", "ma").
                Default is "savitzky_golay".
            **kwargs: Passed through to the chosen engine.

        Returns:
            The smoothed signal from the underlying engine.

        Raises:
            ValueError: If ``method`` is not recognized.
        """
        chosen = method or self.default_method
        Engine = _resolve(chosen)
        return Engine(self.signal).smooth(**kwargs)


def available_methods() -> list[str]:
    """List canonical method names exposed by this API.

    Returns:
        List of method names.
    """
    _, canon = _method_maps()
    return list(canon)

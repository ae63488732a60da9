"""
Process-wide tensorlib options.

Usage:
    from tensorlib import config

    config.set_options(echo_lookups=True)

    with config.options(parallel=True, max_workers=4):
        doubled = t.element_wise_apply(lambda x: x * 2)
"""

from __future__ import annotations
import os
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Iterator, Optional

from .core.storage import DType, float64


@dataclass(frozen=True)
class TensorOptions:
    """
    Current option values.

    Attributes:
        echo_lookups: Log every value returned by ``Tensor.at`` at INFO level
        parallel: Run ``element_wise_apply`` on a thread pool by default
        max_workers: Thread pool size (``None`` lets the executor decide)
        default_dtype: DType used when it cannot be inferred from elements
    """

    echo_lookups: bool = False
    parallel: bool = False
    max_workers: Optional[int] = None
    default_dtype: DType = float64


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


_options = TensorOptions(echo_lookups=_env_flag("TENSORLIB_ECHO_LOOKUPS"))


def get_options() -> TensorOptions:
    """Return the active options."""
    return _options


def set_options(**kwargs) -> TensorOptions:
    """
    Update one or more options.

    Args:
        **kwargs: Option names and new values

    Returns:
        The options that were active before the update

    Raises:
        ValueError: If an unknown option name is given
    """
    global _options

    known = {f.name for f in fields(TensorOptions)}
    unknown = sorted(set(kwargs) - known)
    if unknown:
        raise ValueError(f"Unknown option(s): {', '.join(unknown)}")
    if kwargs.get("max_workers") is not None and kwargs["max_workers"] < 1:
        raise ValueError("max_workers must be at least 1")

    previous = _options
    _options = replace(_options, **kwargs)
    return previous


def reset_options() -> None:
    """Restore defaults."""
    global _options
    _options = TensorOptions()


@contextmanager
def options(**kwargs) -> Iterator[TensorOptions]:
    """Temporarily override options inside a ``with`` block."""
    global _options

    previous = set_options(**kwargs)
    try:
        yield _options
    finally:
        _options = previous

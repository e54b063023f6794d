"""Selection of the active math backend.

The backend is picked, in order of precedence, by an explicit
``set_backend`` call, or by the ``PITCHY_MATH_BACKEND`` environment
variable read on first use, or falls back to ``DEFAULT_BACKEND``.
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Generator, Optional

from pitchy.backend import BACKENDS, MathBackend

BACKEND_ENV_VAR = "PITCHY_MATH_BACKEND"
"""Environment variable naming the backend to use."""

DEFAULT_BACKEND = "std"
"""Backend used when nothing else is configured."""

type BackendLike = str | MathBackend

_active: Optional[MathBackend] = None


def make_backend(backend: BackendLike) -> MathBackend:
    """Resolve a backend name or instance into an instance.

    Args:
        backend: A registered backend name (case-insensitive) or an instance.

    Returns:
        The backend instance.

    Raises:
        ValueError: If the name is not registered.
    """
    if isinstance(backend, MathBackend):
        return backend
    key = backend.strip().lower()
    if key not in BACKENDS:
        known = ", ".join(sorted(BACKENDS))
        raise ValueError(f"Unknown math backend: {backend!r} (expected one of {known})")
    return BACKENDS[key]()


def backend_from_env() -> MathBackend:
    """Build the backend named by the environment, or the default."""
    name = os.environ.get(BACKEND_ENV_VAR, DEFAULT_BACKEND)
    return make_backend(name)


def get_backend() -> MathBackend:
    """Return the active backend, initializing it from the environment."""
    global _active
    if _active is None:
        _active = backend_from_env()
        logging.debug("Using math backend %s", _active.name)
    return _active


def set_backend(backend: Optional[BackendLike]) -> Optional[MathBackend]:
    """Replace the active backend.

    Args:
        backend: Name or instance to activate. None resets to the
            environment/default choice on next use.

    Returns:
        The previously active backend, or None if none had been resolved
        yet. Passing the result back to set_backend restores the old state.
    """
    global _active
    previous = _active
    _active = None if backend is None else make_backend(backend)
    logging.debug(
        "Switched math backend %s -> %s",
        "(env)" if previous is None else previous.name,
        "(env)" if _active is None else _active.name,
    )
    return previous


@contextmanager
def use_backend(backend: BackendLike) -> Generator[MathBackend, None, None]:
    """Activate a backend for the duration of a with block."""
    previous = set_backend(backend)
    try:
        yield get_backend()
    finally:
        set_backend(previous)

"""Decorator form of ``trigger`` for deprecating whole callables."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from deprecations.registry import DeprecationRegistry, get_registry

F = TypeVar("F", bound=Callable[..., Any])


def deprecated(
    package: str,
    version: str,
    link: str,
    message: str,
    *args: Any,
    registry: DeprecationRegistry | None = None,
) -> Callable[[F], F]:
    """Trigger a notice every time the decorated callable is called.

    The reported location is the code calling the decorated function. Without
    an explicit ``registry`` the process-wide one is looked up per call.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*f_args: Any, **f_kwargs: Any) -> Any:
            target = registry or get_registry()
            target.trigger(package, version, link, message, *args, stacklevel=2)
            return func(*f_args, **f_kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator

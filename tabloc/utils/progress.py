"""
Progress display utilities

Provides a decorator for showing a spinner around batch methods.
"""

import asyncio
from functools import wraps
from typing import Any, Callable, Union

from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)


def with_spinner_progress(description: str = "Processing {count} items"):
    """
    Decorator: Spinner + count + elapsed time

    Suitable for batch operations where intermediate progress cannot be reported.

    Display format: "Locating groups in 12 trees... ⠋  0:00:02"

    Args:
        description: Operation description (supports {count} placeholder)

    Features:
        - Normalizes a single item to a one-element list
        - Empty batches skip the spinner and call through directly
        - Works with both sync and async methods

    Example:
        >>> @with_spinner_progress("Locating groups in {count} trees")
        >>> def locate_many(self, roots: list) -> list:
        ...     return [self.locate(root) for root in roots]
    """
    def _normalize(items_or_one: Union[Any, list]) -> list:
        if isinstance(items_or_one, (list, tuple)):
            return list(items_or_one)
        return [items_or_one]

    def _progress() -> Progress:
        return Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}..."),
            TimeElapsedColumn(),
            transient=True,
        )

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def async_wrapper(self, items_or_one, *args, **kwargs):
            items = _normalize(items_or_one)
            if not items:
                return await func(self, items, *args, **kwargs)

            with _progress() as progress:
                progress.add_task(description.format(count=len(items)))
                return await func(self, items, *args, **kwargs)

        @wraps(func)
        def sync_wrapper(self, items_or_one, *args, **kwargs):
            items = _normalize(items_or_one)
            if not items:
                return func(self, items, *args, **kwargs)

            with _progress() as progress:
                progress.add_task(description.format(count=len(items)))
                return func(self, items, *args, **kwargs)

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator

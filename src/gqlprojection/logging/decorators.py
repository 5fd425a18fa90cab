# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Decorators that attach logging to compiler entry points."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import structlog

from gqlprojection.kernel.exceptions import ProjectionException

F = TypeVar("F", bound=Callable[..., Any])


def log_on_error(logger: Any = None, event: str = "projection_compilation_failed") -> Callable[[F], F]:
    """Log any exception raised by the wrapped callable, then re-raise it.

    Typed compiler errors are logged with their kind and code; anything else
    is logged with its traceback. Without *logger*, events go to the structlog
    logger named after the wrapped function's module.
    """

    def decorator(func: F) -> F:
        log = logger if logger is not None else structlog.get_logger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except ProjectionException as exc:
                log.error(
                    event,
                    function=func.__qualname__,
                    kind=exc.kind.value if exc.kind is not None else None,
                    code=exc.code,
                    error=str(exc),
                    **exc.context,
                )
                raise
            except Exception:
                log.exception(event, function=func.__qualname__)
                raise

        return wrapper  # type: ignore[return-value]

    return decorator

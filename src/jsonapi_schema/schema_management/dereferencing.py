"""Reference resolution adapter.

The resolution service is an opaque collaborator invoked as
``service(schema, options, callback)`` that completes exactly once through an
error-first ``callback(error, result)``. :func:`dereference_schema` is the
single place where that callback is turned into an awaitable.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any

import jsonref

from .schema_errors import ResolutionError

ResolutionCallback = Callable[[Any, Any], None]
ResolutionService = Callable[[Mapping[str, Any], Mapping[str, Any], ResolutionCallback], None]

logger = logging.getLogger(__name__)

_JSONREF_DEFAULTS: Mapping[str, Any] = {"proxies": False, "lazy_load": False}


def jsonref_resolution_service(
    schema: Mapping[str, Any], options: Mapping[str, Any], callback: ResolutionCallback
) -> None:
    """Resolve every ``$ref`` in ``schema`` with :func:`jsonref.replace_refs`.

    ``options`` are forwarded as keyword arguments. References are replaced by
    plain objects unless the caller asks for jsonref proxies explicitly.
    """
    kwargs = {**_JSONREF_DEFAULTS, **options}
    try:
        resolved = jsonref.replace_refs(schema, **kwargs)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        callback(exc, None)
        return
    callback(None, resolved)


async def dereference_schema(
    schema: Mapping[str, Any],
    deref_config: Mapping[str, Any] | None = None,
    *,
    service: ResolutionService | None = None,
) -> Any:
    """Dereference ``schema`` through the resolution service.

    Args:
      schema: The raw schema; never mutated.
      deref_config: Options passed through to the service, ``{}`` when omitted.
      service: The resolution service; defaults to the jsonref-backed service.

    Returns:
      The fully resolved schema supplied by the service.

    Raises:
      Exception: The error the service reported, unchanged.
      ResolutionError: If the service reported an error that is not an exception.
    """
    service = service or jsonref_resolution_service
    options = deref_config if deref_config is not None else {}
    loop = asyncio.get_running_loop()
    future: asyncio.Future[Any] = loop.create_future()

    def _settle(error: Any, result: Any) -> None:
        if future.done():
            return
        if error is not None:
            if not isinstance(error, BaseException):
                error = ResolutionError(error)
            future.set_exception(error)
        else:
            future.set_result(result)

    def _complete(error: Any, result: Any = None) -> None:
        loop.call_soon_threadsafe(_settle, error, result)

    logger.debug("Dereferencing schema with options %s", sorted(options))
    service(schema, options, _complete)
    resolved = await future
    logger.debug("Schema dereferenced")
    return resolved

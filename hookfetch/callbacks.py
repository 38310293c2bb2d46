"""
fetch_with_callbacks: one HTTP request wrapped in before / after /
on_success / on_error hooks, returned as a safe result.
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

import structlog

from .safe import SafeResult, safe
from .transport import RequestOptions, fetch

logger = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)

Transport = Callable[[str, RequestOptions], Awaitable[Any]]


@dataclass(frozen=True)
class FetchCallbacks:
    """Lifecycle hooks for one call. Every hook is optional.

    - before(options): runs before the request, may mutate ``options``;
      its return value is passed to ``after``.
    - after(response, data, before_payload): runs on every completed
      response; its return value becomes ``after_data``.
    - on_success(response, data): transforms ``data`` on 2xx responses.
    - on_error(response, data): transforms ``data`` on other responses.

    Hooks may be coroutine functions.
    """

    before: Optional[Callable[[RequestOptions], Any]] = None
    after: Optional[Callable[[Any, Any, Any], Any]] = None
    on_success: Optional[Callable[[Any, Any], Any]] = None
    on_error: Optional[Callable[[Any, Any], Any]] = None


@dataclass(frozen=True)
class FetchResponse:
    response: Any
    data: Any
    after_data: Any = None

    ok = False


@dataclass(frozen=True)
class SuccessResponse(FetchResponse):
    """The server answered with a 2xx status."""

    ok = True


@dataclass(frozen=True)
class ErrorResponse(FetchResponse):
    """The server answered with a non-2xx status."""

    ok = False


async def _call(hook: Optional[Callable], *args, default: Any = None) -> Any:
    if hook is None:
        return default
    result = hook(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


async def fetch_with_callbacks(
    url: str,
    callbacks: Optional[FetchCallbacks] = None,
    options: Optional[RequestOptions] = None,
    *,
    transport: Optional[Transport] = None,
) -> "SafeResult[Union[SuccessResponse, ErrorResponse]]":
    """Fetch ``url`` and run the hooks in order: before, request, after,
    then on_success or on_error depending on the response status.

    ``options`` seeds the request options; the hooks work on a copy owned
    by this call, so the caller's object is never modified. ``transport``
    defaults to an httpx request built from the global config.

    Non-2xx responses are returned as ErrorResponse inside SafeSuccess.
    Anything raised along the way (network errors, a non-JSON body, a hook
    raising) is returned as SafeFailure.
    """
    callbacks = callbacks or FetchCallbacks()
    request_options = options.copy() if options is not None else RequestOptions()
    send = transport or fetch

    async def lifecycle() -> Union[SuccessResponse, ErrorResponse]:
        before_payload = await _call(callbacks.before, request_options)

        response = await send(url, request_options)
        json_data = response.json()
        if inspect.isawaitable(json_data):
            json_data = await json_data

        after_data = await _call(callbacks.after, response, json_data, before_payload)

        if response.is_success:
            data = await _call(callbacks.on_success, response, json_data, default=json_data)
            return SuccessResponse(response=response, data=data, after_data=after_data)

        data = await _call(callbacks.on_error, response, json_data, default=json_data)
        return ErrorResponse(response=response, data=data, after_data=after_data)

    logger.debug("fetch_started", url=url, method=request_options.method)
    result = await safe(lifecycle)

    if not result.success:
        logger.warning("fetch_failed", url=url, error=result.message)
    else:
        status_code = getattr(result.value.response, "status_code", None)
        if result.value.ok:
            logger.debug("fetch_completed", url=url, status_code=status_code)
        else:
            logger.info("fetch_completed", url=url, status_code=status_code)

    return result

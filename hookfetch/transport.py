"""
Encapsulates the actual HTTP call (httpx). One request per call, no pooling,
no retries. Keeps network code separate from the hook orchestration.
"""

import copy
import logging
from typing import Any, Dict, Optional

import httpx

from .config import config

logger = logging.getLogger(__name__)


class RequestOptions:
    """Mutable request options for a single call.

    ``before`` hooks receive the call's instance and may change any field,
    e.g. add a header or shorten ``timeout``.
    """

    def __init__(
        self,
        method: str = "GET",
        headers: Dict[str, str] = None,
        params: Dict[str, Any] = None,
        json: Any = None,
        content: Optional[bytes] = None,
        cookies: Dict[str, str] = None,
        timeout: Optional[float] = None,
        extensions: Dict[str, Any] = None,
    ):
        self.method = method
        self.headers = headers or {}
        self.params = params or {}
        self.json = json
        self.content = content
        self.cookies = cookies or {}
        self.timeout = timeout
        self.extensions = extensions or {}

    def copy(self) -> "RequestOptions":
        """Return an independent copy, including the JSON body."""
        clone = copy.copy(self)
        clone.json = copy.deepcopy(self.json)
        clone.headers = dict(self.headers)
        clone.params = dict(self.params)
        clone.cookies = dict(self.cookies)
        clone.extensions = dict(self.extensions)
        return clone

    def __repr__(self) -> str:
        return (
            f"RequestOptions(method={self.method!r}, headers={self.headers!r}, "
            f"params={self.params!r}, timeout={self.timeout!r})"
        )


class HTTPTransport:
    def __init__(
        self,
        user_agent: str = None,
        timeout: float = None,
        follow_redirects: bool = None,
        max_redirects: int = None,
        mock_transport: httpx.AsyncBaseTransport = None,
    ):
        """Initialize the transport, filling unset values from config."""
        fetcher_config = config.fetcher
        self.user_agent = user_agent or fetcher_config.get('user_agent', 'hookfetch/1.0')
        self.timeout = timeout if timeout is not None else fetcher_config.get('timeout', 30.0)
        self.follow_redirects = (
            follow_redirects if follow_redirects is not None
            else fetcher_config.get('follow_redirects', True)
        )
        self.max_redirects = (
            max_redirects if max_redirects is not None
            else fetcher_config.get('max_redirects', 5)
        )
        self._transport = mock_transport

    async def __call__(self, url: str, options: RequestOptions) -> httpx.Response:
        """Issue exactly one request and return the fully read response."""
        timeout = options.timeout if options.timeout is not None else self.timeout

        async with httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            follow_redirects=self.follow_redirects,
            max_redirects=self.max_redirects,
            headers={'User-Agent': self.user_agent},
            cookies=options.cookies or None,
            transport=self._transport,
        ) as client:
            logger.debug(f"{options.method} {url}")
            return await client.request(
                options.method,
                url,
                headers=options.headers,
                params=options.params or None,
                json=options.json,
                content=options.content,
                extensions=options.extensions or None,
            )


async def fetch(url: str, options: RequestOptions = None) -> httpx.Response:
    """Fetch a URL with a transport built from the global config."""
    return await HTTPTransport()(url, options or RequestOptions())

"""Things related to making and processing HTTP requests."""

from copy import deepcopy
from typing import Any, Awaitable, Callable, Dict, Mapping

import aiohttp

from .resource import ResourceError

__all__ = ('Request', 'Response', 'Handler', 'HTTPError', 'Unauthorized',
           'http', 'check_status', 'basic_auth')

UNAUTHORIZED_MESSAGE = 'Client not authorized. Check your store URL and ' \
    'credentials are correct and try again.'


class Request:
    """Representation of HTTP request.

    :param method:
    :param url:
    :param params: "GET" query parameters.
    :param data: JSONable data to be included in body.
    :param headers:
    """

    def __init__(
        self,
        method: str = 'GET',
        url: str = None,
        params: Dict[str, str] = None,
        data: Any = None,
        headers: Dict[str, str] = None,
    ) -> None:
        self.method = method
        self.url = url
        self.params = params or {}
        self.data = data
        self.headers = headers or {}

    def copy(self) -> 'Request':
        """Make a deep copy."""
        return deepcopy(self)


class Response:
    """Representation of HTTP response.

    :param status:
    :param reason:
    :param headers:
    :param body: Raw (decoded to `str`) body.
    """

    def __init__(
        self,
        status: int = None,
        reason: str = None,
        headers: Mapping[str, str] = None,
        body: str = '',
    ) -> None:
        self.status = status
        self.reason = reason
        self.headers = headers or {}
        self.body = body


class HTTPError(ResourceError):
    """Server responded with an error status.

    :param response:
    :param msg: Defaults to status line of the response.
    """

    def __init__(self, response: Response, msg: str = None) -> None:
        self.response = response
        super().__init__(
            msg or f'HTTP response: {response.status} {response.reason}',
        )


class Unauthorized(HTTPError):
    """Server responded with 401."""

    pass


Handler = Callable[[Request], Awaitable[Response]]
"""Middleware type."""


def http(session: aiohttp.ClientSession) -> Handler:
    """`aiohttp` based request handler.

    :param session:
    """
    async def handler(request: Request) -> Response:
        async with session.request(
            request.method,
            request.url,
            params=request.params or None,
            json=request.data,
            headers=request.headers or None,
        ) as response:
            return Response(
                status=response.status,
                reason=response.reason,
                headers=response.headers,
                body=await response.text(encoding='utf-8'),
            )
    return handler


def check_status(next_handler: Handler) -> Handler:
    """Raise an exception for status >= 400.

    :param next_handler:
    :raises Unauthorized: On 401.
    :raises HTTPError: On other statuses >= 400.
    """
    async def handler(request: Request) -> Response:
        response = await next_handler(request)
        if response.status == 401:
            raise Unauthorized(response, UNAUTHORIZED_MESSAGE)
        if response.status >= 400:
            raise HTTPError(response)
        return response
    return handler


def basic_auth(next_handler: Handler, username: str, password: str) \
        -> Handler:
    """Add HTTP basic authentication header to requests.

    :param next_handler:
    :param username:
    :param password:
    """
    authorization = aiohttp.BasicAuth(username, password).encode()

    async def handler(request: Request) -> Response:
        request.headers['Authorization'] = authorization
        return await next_handler(request)
    return handler

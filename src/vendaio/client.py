"""Vend API transport."""

import logging
from datetime import date
from typing import Any, Mapping, Type, TypeVar
from urllib.parse import quote

import aiohttp

from .repository import Repository
from .request import Request, Response, basic_auth, check_status, http
from .resource import Resource

__all__ = ('Client',)

log = logging.getLogger(__name__)

R = TypeVar('R', bound=Resource)

SINCE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _format(value: Any) -> str:
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, date):
        return value.strftime(SINCE_FORMAT)
    return str(value)


def _quote(value: Any) -> str:
    return quote(_format(value), safe='')


class Client:
    """Client for a single Vend store.

    Implements the transport expected by `.Resource`: a coroutine method
    `request` returning a `.Response` with raw ``body``.

    Example::

        async with aiohttp.ClientSession() as session:
            client = Client('mystore', 'user', 'secret', session)
            products = await Product.all(client)

    :param store: Store name, the subdomain of ``vendhq.com``.
    :param username:
    :param password:
    :param session: `aiohttp` client session. Not closed by this class.
    :param base_url: Override the API root, by default
        ``https://{store}.vendhq.com/api/``.
    """

    def __init__(
        self,
        store: str,
        username: str,
        password: str,
        session: aiohttp.ClientSession,
        *, base_url: str = None,
    ) -> None:
        self.store = store
        self.username = username
        self.base_url = base_url or f'https://{store}.vendhq.com/api/'
        self._handler = basic_auth(
            check_status(http(session)),
            username,
            password,
        )

    def url_for(
        self,
        path: str,
        *, id: Any = None,  # noqa: B002
        since: Any = None,
        outlet_id: Any = None,
    ) -> str:
        """Build full URL of an endpoint.

        :param path: Endpoint, e.g. ``products``.
        :param id: Appended as ``/{id}``.
        :param since: Appended as ``/since/{since}``, dates and datetimes
            are formatted as ``%Y-%m-%d %H:%M:%S``.
        :param outlet_id: Appended as ``/outlet_id/{outlet_id}``.
        """
        url = self.base_url + path
        if id is not None:
            url += '/' + _quote(id)
        if since is not None:
            url += '/since/' + _quote(since)
        if outlet_id is not None:
            url += '/outlet_id/' + _quote(outlet_id)
        return url

    async def request(
        self,
        path: str,
        *, id: Any = None,  # noqa: B002
        since: Any = None,
        outlet_id: Any = None,
        url_params: Mapping[str, Any] = None,
        method: str = 'get',
        data: Any = None,
    ) -> Response:
        """Make a request to the API.

        :param path: Endpoint, e.g. ``products``.
        :param id:
        :param since:
        :param outlet_id:
        :param url_params: Query parameters. Booleans and `None` are sent as
            ``true``/``false``/``null``, dates in the same format as *since*.
        :param method: HTTP method, case insensitive.
        :param data: JSONable request body.
        :raises .Unauthorized:
        :raises .HTTPError:
        """
        request = Request(
            method.upper(),
            self.url_for(path, id=id, since=since, outlet_id=outlet_id),
            params={
                str(k): _format(v) for k, v in (url_params or {}).items()
            },
            data=data,
        )
        log.debug('%s %s %s', request.method, request.url, request.params)
        response = await self._handler(request)
        log.debug('%s %s: %s %s', request.method, request.url,
                  response.status, response.reason)
        return response

    def resource(self, resource_class: Type[R]) -> Repository[R]:
        """Return a `.Repository` of *resource_class* bound to this client.

        :param resource_class:
        """
        return Repository(self, resource_class)

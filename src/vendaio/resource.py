"""Base class for remote resources backed by untyped JSON objects."""

import json
from functools import lru_cache, partial
from types import MappingProxyType
from typing import Any, AsyncIterator, ClassVar, Iterable, List, Mapping, \
    NamedTuple, Type, TypeVar

from ._util import full_name
from .collection import Collection

__all__ = (
    'Resource',
    'ResourceType',
    'ResourceError',
    'InvalidResponse',
    'IllegalAction',
)

R = TypeVar('R', bound='Resource')


class ResourceError(Exception):
    """Base resource error."""

    pass


class InvalidResponse(ResourceError):
    """Response body is not JSON or doesn't hold the expected collection."""

    pass


class IllegalAction(ResourceError):
    """Action can't be performed on this resource (e.g. it has no id)."""

    pass


class ResourceType(NamedTuple):
    """Wire names of a resource class.

    :ivar endpoint_name: Singular name, e.g. ``foo``.
    :ivar collection_name: Plural name, e.g. ``foos``. Used both as
        the request endpoint and as the response key wrapping the records.
    """

    endpoint_name: str
    collection_name: str


@lru_cache(maxsize=None)
def _resource_type(cls: Type['Resource']) -> ResourceType:
    # _Meta is looked up on the class itself only, subclasses get their own
    # derived names.
    meta = cls.__dict__.get('_Meta')
    endpoint_name = getattr(meta, 'endpoint_name', None) \
        or cls.__name__.lower()
    collection_name = getattr(meta, 'collection_name', None) \
        or endpoint_name + 's'
    return ResourceType(endpoint_name, collection_name)


class Resource:
    """Base model class.

    Concrete resources are declared by subclassing alone, wire names are
    derived from the class name::

        class Product(Resource):
            pass

        product = await Product.find(client, '42')
        print(product.name)

    Names can be overridden with an inner ``_Meta`` class having
    ``endpoint_name`` and/or ``collection_name`` attributes.

    Every top-level key of the JSON object is readable as an attribute and
    takes precedence over anything defined on the class. Public names which
    are missing from the object read as `None`.

    :param client: Transport, an object with a coroutine method
        ``request(endpoint, **params)`` returning a response with
        a ``body`` string.
    :param attrs: Decoded JSON object.
    """

    _Meta: ClassVar[Any]

    def __init__(self, client: Any, attrs: Mapping[str, Any] = None) -> None:
        if attrs is None:
            attrs = {}
        if not isinstance(attrs, Mapping):
            raise ResourceError(f'Expected a mapping, got {type(attrs)!r}')
        self._client = client
        self._attrs = MappingProxyType(dict(attrs))

    @classmethod
    def build(cls: Type[R], client: Any, attrs: Mapping[str, Any] = None) -> R:
        """Create an instance without talking to the server.

        :param client:
        :param attrs:
        """
        return cls(client, attrs)

    @property
    def client(self) -> Any:
        """Transport used by this resource."""
        return self._client

    @property
    def attrs(self) -> Mapping[str, Any]:
        """Read-only mapping of the raw attributes."""
        return self._attrs

    def get(self, key: str, default: Any = None) -> Any:
        return self._attrs.get(key, default)

    def __getattribute__(self, name: str) -> Any:
        if name[:1] != '_':
            attrs = object.__getattribute__(self, '_attrs')
            if name in attrs:
                return attrs[name]
        return object.__getattribute__(self, name)

    def __getattr__(self, name: str) -> Any:
        if name[:1] == '_':
            raise AttributeError(
                f'{type(self).__name__!r} object has no attribute {name!r}',
            )
        return None

    def __setattr__(self, name: str, value: Any) -> None:
        if name[:1] != '_':
            raise AttributeError(f'{full_name(type(self), name)} is read-only')
        object.__setattr__(self, name, value)

    def __getitem__(self, key: str) -> Any:
        return self._attrs[key]

    def __contains__(self, key: object) -> bool:
        return key in self._attrs

    def __dir__(self) -> Iterable[str]:
        return sorted(set(object.__dir__(self)) | set(self._attrs))

    def __repr__(self) -> str:
        return f'<{full_name(type(self))} id={self._attrs.get("id")!r}>'

    @classmethod
    def resource_type(cls) -> ResourceType:
        """Get wire names of this class."""
        return _resource_type(cls)

    @classmethod
    def endpoint_name(cls) -> str:
        return cls.resource_type().endpoint_name

    @classmethod
    def collection_name(cls) -> str:
        return cls.resource_type().collection_name

    @staticmethod
    def parse_json(raw: str) -> Any:
        """Decode response body.

        The shape of the decoded value is not checked.

        :param raw:
        :raises InvalidResponse: If *raw* is not valid JSON.
        """
        try:
            return json.loads(raw)
        except ValueError as e:
            raise InvalidResponse(f'Response is not valid JSON: {e}') from e

    @classmethod
    def _records(cls, raw: str) -> List[Any]:
        """Decode body and get the list of records under collection key."""
        data = cls.parse_json(raw)
        key = cls.collection_name()
        if not isinstance(data, dict) or key not in data:
            raise InvalidResponse(f'Response has no {key!r} collection')
        records = data[key]
        if not isinstance(records, list):
            raise InvalidResponse(
                f'Expected a list under {key!r}, got {type(records)!r}',
            )
        return records

    @classmethod
    def initialize_singular(cls: Type[R], client: Any, raw: str) -> R:
        """Create an instance from the first record of a response.

        :param client:
        :param raw: Response body, e.g. ``{"foos": [{"id": "1"}]}``.
        :raises InvalidResponse:
        """
        records = cls._records(raw)
        if not records:
            raise InvalidResponse(
                f'{cls.collection_name()!r} collection is empty',
            )
        return cls(client, records[0])

    @classmethod
    def initialize_collection(cls: Type[R], client: Any, raw: str) -> List[R]:
        """Create instances from all records of a response, in order.

        :param client:
        :param raw: Response body.
        :raises InvalidResponse:
        """
        return [cls(client, record) for record in cls._records(raw)]

    @classmethod
    async def find(cls: Type[R], client: Any, id: Any) -> R:  # noqa: B002
        """Fetch a resource by id.

        :param client:
        :param id: Identifier value.
        """
        response = await client.request(cls.collection_name(), id=id)
        return cls.initialize_singular(client, response.body)

    @classmethod
    async def _fetch(cls: Type[R], client: Any, **params: Any) \
            -> AsyncIterator[R]:
        response = await client.request(cls.collection_name(), **params)
        for resource in cls.initialize_collection(client, response.body):
            yield resource

    @classmethod
    def all(cls: Type[R], client: Any) -> Collection[R]:
        """Return collection of all resources.

        The request is made when the collection is first iterated or awaited.

        :param client:
        """
        return Collection(partial(cls._fetch, client))

    @classmethod
    def since(cls: Type[R], client: Any, time: Any) -> Collection[R]:
        """Return collection of resources modified since *time*.

        :param client:
        :param time: Usually a `datetime.datetime`, formatting is left
            to the client.
        """
        return Collection(partial(cls._fetch, client, since=time))

    @classmethod
    def outlet_id(cls: Type[R], client: Any, outlet_id: Any) -> Collection[R]:
        """Return collection of resources belonging to an outlet.

        :param client:
        :param outlet_id:
        """
        return Collection(partial(cls._fetch, client, outlet_id=outlet_id))

    @classmethod
    def search(
        cls: Type[R],
        client: Any,
        field: str,
        value: Any,
    ) -> Collection[R]:
        """Return collection of resources where *field* equals *value*.

        :param client:
        :param field: Passed to the server as a query parameter name.
        :param value:
        """
        return Collection(
            partial(cls._fetch, client, url_params={field: value}),
        )

    async def _delete(self, id: Any) -> Any:  # noqa: B002
        return await self._client.request(
            type(self).collection_name(),
            method='delete',
            id=id,
        )

    async def delete_or_raise(self) -> Any:
        """Delete this resource on the server.

        :return: Whatever the client returned.
        :raises IllegalAction: If the resource has no id.
        """
        id = self._attrs.get('id')  # noqa: B001
        if id is None:
            raise IllegalAction(f'{type(self).__name__} has no unique ID')
        return await self._delete(id)

    async def delete(self) -> bool:
        """Delete this resource on the server.

        :return: `False` if the resource has no id (nothing is sent),
            `True` otherwise.
        """
        id = self._attrs.get('id')  # noqa: B001
        if id is None:
            return False
        await self._delete(id)
        return True

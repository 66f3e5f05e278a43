from typing import Any, Generic, Mapping, Type, TypeVar

from .collection import Collection
from .resource import Resource

__all__ = ('Repository',)

R = TypeVar('R', bound=Resource)


class Repository(Generic[R]):
    """Resource class bound to a client.

    Example::

        products = Repository(client, Product)
        product = await products.find('42')
        async for product in products.search('sku', 'ABC'):
            ...

    :param client:
    :param resource_class:
    """

    def __init__(self, client: Any, resource_class: Type[R]) -> None:
        self._client = client
        self._resource_class = resource_class

    @property
    def resource_class(self) -> Type[R]:
        return self._resource_class

    async def find(self, id: Any) -> R:  # noqa: B002
        """Fetch resource by id.

        :param id:
        """
        return await self._resource_class.find(self._client, id)

    def all(self) -> Collection[R]:
        """Return collection of all resources in this repository."""
        return self._resource_class.all(self._client)

    def since(self, time: Any) -> Collection[R]:
        """Return collection of resources modified since *time*.

        :param time:
        """
        return self._resource_class.since(self._client, time)

    def outlet_id(self, outlet_id: Any) -> Collection[R]:
        """Return collection of resources belonging to an outlet.

        :param outlet_id:
        """
        return self._resource_class.outlet_id(self._client, outlet_id)

    def search(self, field: str, value: Any) -> Collection[R]:
        """Return collection of resources filtered by a single field.

        :param field:
        :param value:
        """
        return self._resource_class.search(self._client, field, value)

    def build(self, attrs: Mapping[str, Any] = None) -> R:
        """Create an instance, but don't send it anywhere."""
        return self._resource_class.build(self._client, attrs)

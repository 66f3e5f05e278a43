"""Asynchronous, lazily loaded collection of resources."""

from typing import Any, AsyncIterable, AsyncIterator, Callable, Generator, \
    List, Optional, Sequence, TypeVar, Union, overload

from aiostream import stream

__all__ = ('Collection',)

T = TypeVar('T')

Source = Union[
    Sequence[T],
    AsyncIterable[T],
    Callable[[], AsyncIterable[T]],
]


class Collection(AsyncIterable[T]):
    """Asynchronous, lazy and read-only collection of resources.

    The source is loaded completely before the first item is handed out,
    later passes replay the items from memory. Stopping an ``async for``
    early doesn't lose anything.

    If loading fails, the error propagates. The next access tries again
    when the source is a factory (a callable returning an async iterable),
    otherwise it raises the same error again.

    Usage::

        products = await Product.all(client)        # list

        async for product in Product.all(client):
            ...

        first = await Product.all(client)[0]

    :param collection: A sequence, an async iterable or a factory of async
        iterables which will be used as a source of items for this
        collection.
    """

    def __init__(self, collection: Source = ()) -> None:
        self._items: Optional[Sequence[T]] = None
        self._source = None
        self._factory = None
        self._error: Optional[Exception] = None
        if isinstance(collection, Sequence):
            self._items = collection
        elif callable(collection):
            self._factory = collection
        else:
            self._source = collection

    @property
    def loaded(self) -> bool:
        """`True` if the source has been consumed."""
        return self._items is not None

    async def _load(self) -> Sequence[T]:
        if self._items is not None:
            return self._items
        if self._factory is not None:
            source = self._factory()
        elif self._error is not None:
            # one-shot source, can't be read again after a failure
            raise self._error
        else:
            source = self._source
        try:
            self._items = await stream.list(stream.iterate(source))
        except Exception as e:
            self._error = e
            raise
        return self._items

    async def to_list(self) -> List[T]:
        """Load everything and return a list."""
        return await self[:]

    def __await__(self) -> Generator[Any, None, List[T]]:
        return self.to_list().__await__()

    async def __aiter__(self) -> AsyncIterator[T]:
        for item in await self._load():
            yield item

    @overload
    async def __getitem__(self, index: int) -> T:
        pass

    @overload  # noqa: F811
    async def __getitem__(self, index: slice) -> List[T]:
        pass

    async def __getitem__(self, index: Any) -> Any:  # noqa: F811
        result = (await self._load())[index]
        if isinstance(index, slice) and not isinstance(result, list):
            result = list(result)
        return result

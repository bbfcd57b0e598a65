from typing import Generic, Iterator, Optional, Sequence, TypeVar, Union, overload

from atipy.core.at import ElementRef, at, at_mut, try_at
from atipy.core.kinds import IndexLike
from atipy.core.normalize import normalize_index

_T = TypeVar('_T')
_D = TypeVar('_D')


class AtSequence(Generic[_T]):
    """
    Add ``at`` indexing to any sequence; integer-like indices of every supported kind are normalized and bounds
    checked, negative indices address items from the end.
    Slice indices are passed to the wrapped sequence unchanged.
    """
    def __init__(self, sequence: Sequence[_T]) -> None:
        self._sequence = sequence

    @overload
    def __getitem__(self, index: IndexLike) -> _T: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[_T]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._sequence[index]
        return self._sequence[normalize_index(len(self._sequence), index)]

    def __len__(self) -> int:
        return len(self._sequence)

    def __iter__(self) -> Iterator[_T]:
        return iter(self._sequence)

    def at(self, index: IndexLike) -> _T:
        return at(self._sequence, index)

    def try_at(self, index: IndexLike, default: Optional[_D] = None) -> Union[_T, _D, None]:
        return try_at(self._sequence, index, default)


class AtList(list[_T]):
    """
    A list accepting every supported index kind; integer-like indices are normalized and bounds checked before they
    reach the builtin list, so fixed width indices never wrap and oversized indices fail with ``OutOfBoundsError``.
    Slice indices behave as implemented by the builtin list.
    """

    def _offset(self, index: Union[IndexLike, slice]) -> Union[int, slice]:
        if isinstance(index, slice):
            return index
        return normalize_index(len(self), index)

    def __getitem__(self, index: Union[IndexLike, slice]) -> Union[_T, list[_T]]:
        return super().__getitem__(self._offset(index))

    def __setitem__(self, index: Union[IndexLike, slice], value) -> None:
        super().__setitem__(self._offset(index), value)

    def __delitem__(self, index: Union[IndexLike, slice]) -> None:
        super().__delitem__(self._offset(index))

    def at(self, index: IndexLike) -> _T:
        return at(self, index)

    def at_mut(self, index: IndexLike) -> ElementRef[_T]:
        return at_mut(self, index)

    def try_at(self, index: IndexLike, default: Optional[_D] = None) -> Union[_T, _D, None]:
        return try_at(self, index, default)

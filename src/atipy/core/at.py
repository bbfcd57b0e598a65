from typing import Generic, MutableSequence, Optional, Sequence, TypeVar, Union

from atipy.core.kinds import IndexLike, IntKind
from atipy.core.normalize import normalize_index
from atipy.core.util.errors import OutOfBoundsError

_T = TypeVar('_T')
_D = TypeVar('_D')


class ElementRef(Generic[_T]):
    """
    A writable handle to a single slot of a mutable sequence.
    Reads and writes go directly to the underlying sequence, so a write is visible to every later access of that
    slot. Accessing a slot that no longer exists because the sequence shrank raises ``OutOfBoundsError``.
    """

    __slots__ = ('_sequence', '_offset')

    def __init__(self, sequence: MutableSequence[_T], offset: int) -> None:
        self._sequence = sequence
        self._offset = offset

    @property
    def offset(self) -> int:
        return self._offset

    def _checked_offset(self) -> int:
        # the sequence may have shrunk since the handle was created
        length = len(self._sequence)
        if self._offset >= length:
            raise OutOfBoundsError(self._offset, length, IntKind.Int, self._offset)
        return self._offset

    @property
    def value(self) -> _T:
        return self._sequence[self._checked_offset()]

    @value.setter
    def value(self, value: _T) -> None:
        self._sequence[self._checked_offset()] = value

    def get(self) -> _T:
        return self.value

    def set(self, value: _T) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(offset={self._offset}, value={self.value!r})'


def at(sequence: Sequence[_T], index: IndexLike) -> _T:
    """
    Returns an item of a sequence; negative indices address items from the end.
    :param sequence: The sequence to index.
    :param index: The logical index; any supported integer kind.
    :return: The item at the normalized offset.
    :raises OutOfBoundsError: If the index does not address an item of the sequence.
    """
    return sequence[normalize_index(len(sequence), index)]


def at_mut(sequence: MutableSequence[_T], index: IndexLike) -> ElementRef[_T]:
    """
    Returns a writable handle to an item of a mutable sequence; negative indices address items from the end.
    :param sequence: The sequence to index.
    :param index: The logical index; any supported integer kind.
    :return: A handle to the slot at the normalized offset.
    :raises OutOfBoundsError: If the index does not address an item of the sequence.
    :raises TypeError: If the sequence does not support item assignment.
    """
    if not hasattr(type(sequence), '__setitem__'):
        raise TypeError(f'\'{type(sequence).__name__}\' object does not support item assignment')
    return ElementRef(sequence, normalize_index(len(sequence), index))


def try_at(sequence: Sequence[_T], index: IndexLike, default: Optional[_D] = None) -> Union[_T, _D, None]:
    """
    Checked variant of ``at`` returning a default value instead of raising on out-of-bounds indices.
    :param sequence: The sequence to index.
    :param index: The logical index; any supported integer kind.
    :param default: The value returned if the index is out of bounds (defaults to ``None``).
    :return: The item at the normalized offset or ``default``.
    """
    try:
        offset = normalize_index(len(sequence), index)
    except OutOfBoundsError:
        return default
    return sequence[offset]

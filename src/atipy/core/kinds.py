from dataclasses import dataclass
from operator import index as as_index
from typing import Final, Optional, SupportsIndex, Union

import numpy as np

from atipy.core.util.defs import SIZE_BITS, StrEnum


class IntKind(StrEnum):
    """
    Enum describing the closed set of integer representations accepted as an index.
    ``Int`` is the unbounded builtin ``int``; every other kind has a fixed width.
    """
    U8 = 'u8'
    U16 = 'u16'
    U32 = 'u32'
    U64 = 'u64'
    U128 = 'u128'
    I8 = 'i8'
    I16 = 'i16'
    I32 = 'i32'
    I64 = 'i64'
    I128 = 'i128'
    ISize = 'isize'
    Int = 'int'

    @property
    def bits(self) -> Optional[int]:
        return _BITS[self]

    @property
    def signed(self) -> bool:
        return self not in _UNSIGNED

    @property
    def min_value(self) -> Optional[int]:
        """
        The smallest value representable by this kind; ``None`` for the unbounded ``Int`` kind.
        """
        bits = self.bits
        if bits is None:
            return None
        return -(1 << (bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> Optional[int]:
        """
        The largest value representable by this kind; ``None`` for the unbounded ``Int`` kind.
        """
        bits = self.bits
        if bits is None:
            return None
        return (1 << (bits - 1)) - 1 if self.signed else (1 << bits) - 1

    def contains(self, value: int) -> bool:
        """
        Checks whether a value is representable by this kind.
        :param value: The value to check.
        :return: ``True`` if the value lies within ``[min_value, max_value]``; otherwise ``False``.
        """
        if self.bits is None:
            return True
        return self.min_value <= value <= self.max_value


_BITS: Final[dict[IntKind, Optional[int]]] = {
    IntKind.U8: 8,
    IntKind.U16: 16,
    IntKind.U32: 32,
    IntKind.U64: 64,
    IntKind.U128: 128,
    IntKind.I8: 8,
    IntKind.I16: 16,
    IntKind.I32: 32,
    IntKind.I64: 64,
    IntKind.I128: 128,
    IntKind.ISize: SIZE_BITS,
    IntKind.Int: None,
}

_UNSIGNED: Final[frozenset[IntKind]] = frozenset((IntKind.U8, IntKind.U16, IntKind.U32, IntKind.U64, IntKind.U128))

# numpy dtype kind character and bit width -> index kind
_NUMPY_KINDS: Final[dict[tuple[str, int], IntKind]] = {
    ('u', 8): IntKind.U8,
    ('u', 16): IntKind.U16,
    ('u', 32): IntKind.U32,
    ('u', 64): IntKind.U64,
    ('i', 8): IntKind.I8,
    ('i', 16): IntKind.I16,
    ('i', 32): IntKind.I32,
    ('i', 64): IntKind.I64,
}


@dataclass(frozen=True)
class TypedIndex:
    """
    An integer value tagged with the kind it is represented as.
    Used for kinds without a numpy scalar (``u128``, ``i128``, ``isize``) or to make the width of an index explicit.
    :cvar kind: The integer kind of the index.
    :cvar value: The numeric value of the index.
    """
    kind: IntKind
    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, 'kind', IntKind(self.kind))
        if isinstance(self.value, (bool, np.bool_)):
            raise TypeError(f'{type(self.value).__name__} is not a valid {self.kind.value} value')
        value = as_index(self.value)
        if not self.kind.contains(value):
            raise OverflowError(f'Python integer {value} out of bounds for {self.kind.value}')
        object.__setattr__(self, 'value', value)

    def __index__(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f'{self.value}{self.kind.value}'


IndexLike = Union[TypedIndex, np.integer, SupportsIndex]


def u8(value: SupportsIndex) -> TypedIndex:
    return TypedIndex(IntKind.U8, value)


def u16(value: SupportsIndex) -> TypedIndex:
    return TypedIndex(IntKind.U16, value)


def u32(value: SupportsIndex) -> TypedIndex:
    return TypedIndex(IntKind.U32, value)


def u64(value: SupportsIndex) -> TypedIndex:
    return TypedIndex(IntKind.U64, value)


def u128(value: SupportsIndex) -> TypedIndex:
    return TypedIndex(IntKind.U128, value)


def i8(value: SupportsIndex) -> TypedIndex:
    return TypedIndex(IntKind.I8, value)


def i16(value: SupportsIndex) -> TypedIndex:
    return TypedIndex(IntKind.I16, value)


def i32(value: SupportsIndex) -> TypedIndex:
    return TypedIndex(IntKind.I32, value)


def i64(value: SupportsIndex) -> TypedIndex:
    return TypedIndex(IntKind.I64, value)


def i128(value: SupportsIndex) -> TypedIndex:
    return TypedIndex(IntKind.I128, value)


def isize(value: SupportsIndex) -> TypedIndex:
    return TypedIndex(IntKind.ISize, value)


def kind_of(index: IndexLike) -> IntKind:
    """
    Determines the integer kind of an index.
    :param index: The index to inspect.
    :return: The kind of a typed index, the kind matching the dtype of a numpy integer scalar, or ``IntKind.Int`` for
    builtin integers and any other object implementing ``__index__``.
    :raises TypeError: If the index is a boolean or cannot be interpreted as an integer.
    """
    if isinstance(index, (bool, np.bool_)):
        raise TypeError(f'indices must be integers, not {type(index).__name__}')
    if isinstance(index, TypedIndex):
        return index.kind
    if isinstance(index, np.integer):
        dtype = index.dtype
        kind = _NUMPY_KINDS.get((dtype.kind, dtype.itemsize * 8))
        if kind is None:
            raise TypeError(f'indices must be integers, not {type(index).__name__}')
        return kind
    if isinstance(index, int):
        return IntKind.Int
    if not hasattr(type(index), '__index__'):
        raise TypeError(f'indices must be integers, not {type(index).__name__}')
    return IntKind.Int


def as_int(index: IndexLike) -> tuple[IntKind, int]:
    """
    Splits an index into its kind and its exact value.
    :param index: The index to convert.
    :return: A tuple containing the kind of the index and its value as a builtin ``int``.
    """
    return kind_of(index), as_index(index)

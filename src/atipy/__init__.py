"""
Ergonomic indexing of sequences with any signed or unsigned integer kind; negative indices address items from the end.
"""

from atipy.core import (
    IntKind, TypedIndex, kind_of, as_int,
    u8, u16, u32, u64, u128, i8, i16, i32, i64, i128, isize,
    normalize_index,
    ElementRef, at, at_mut, try_at,
)
from atipy.core.util.collections import AtSequence, AtList
from atipy.core.util.errors import OutOfBoundsError

__version__ = '0.1.0'

from logging import Logger, getLogger
from typing import Final

from atipy.core.kinds import IndexLike, as_int
from atipy.core.util.defs import SIZE_MAX, SIZE_MIN, USIZE_MAX
from atipy.core.util.errors import OutOfBoundsError

logger: Final[Logger] = getLogger(__name__)


def normalize_index(length: int, index: IndexLike) -> int:
    """
    Converts a logical index into a zero-based forward offset into a sequence of the given length.
    Non-negative indices count from the front; negative indices of a signed kind count from the back, i.e., ``-1``
    resolves to ``length - 1``.
    :param length: The length of the indexed sequence.
    :param index: The logical index; any supported integer kind.
    :return: An offset satisfying ``0 <= offset < length``.
    :raises OutOfBoundsError: If no valid offset corresponds to the index, including indices whose magnitude does not
    fit the platform size type.
    :raises ValueError: If the length is negative.
    :raises TypeError: If the index is not of a supported integer kind.
    """
    if length < 0:
        raise ValueError(f'Sequence length must not be negative, got {length}')

    kind, value = as_int(index)

    if kind.signed:
        representable = SIZE_MIN <= value <= SIZE_MAX
    else:
        representable = value <= USIZE_MAX

    if not representable:
        logger.debug(f'Index {value} ({kind.value}) does not fit the platform size type')
        raise OutOfBoundsError(value, length, kind, None)

    if kind.signed and value < 0:
        offset = length + value
    else:
        offset = value

    if not 0 <= offset < length:
        logger.debug(f'Index {value} ({kind.value}) resolves to offset {offset} outside of [0, {length})')
        raise OutOfBoundsError(value, length, kind, offset)

    return offset

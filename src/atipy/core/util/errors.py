from typing import Optional, TYPE_CHECKING

from atipy.core.util.defs import OOB_NEGATIVE_MSG, OOB_POSITIVE_MSG, OOB_UNREPRESENTABLE_MSG

if TYPE_CHECKING:
    from atipy.core.kinds import IntKind


class OutOfBoundsError(IndexError):
    """
    Raised when a logical index does not resolve to an offset within ``[0, len)`` of the indexed sequence.
    :ivar index: The logical index as passed by the caller, converted to an ``int``.
    :ivar length: The length of the indexed sequence.
    :ivar kind: The integer kind of the passed index.
    :ivar offset: The computed forward offset; ``None`` if the index does not fit the platform size type.
    """

    def __init__(self, index: int, length: int, kind: 'IntKind', offset: Optional[int]) -> None:
        self.index = index
        self.length = length
        self.kind = kind
        self.offset = offset

        if offset is None:
            msg = OOB_UNREPRESENTABLE_MSG.format(index=index)
        elif offset < 0:
            msg = OOB_NEGATIVE_MSG.format(offset=offset)
        else:
            msg = OOB_POSITIVE_MSG.format(length=length, index=index)
        super().__init__(msg)

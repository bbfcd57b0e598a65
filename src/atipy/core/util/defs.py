import sys
from enum import Enum
from typing import Final


class StrEnum(str, Enum):
    pass

# META
PACKAGE_NAME: Final[str] = __name__.split('.')[0]

# PLATFORM SIZE TYPE
SIZE_BITS: Final[int] = sys.maxsize.bit_length() + 1
SIZE_MAX: Final[int] = sys.maxsize
SIZE_MIN: Final[int] = -sys.maxsize - 1
USIZE_MAX: Final[int] = 2 * sys.maxsize + 1

# MESSAGES
OOB_NEGATIVE_MSG: Final[str] = 'index out of bounds: the index is ({offset})'
OOB_POSITIVE_MSG: Final[str] = 'index out of bounds: the len is {length} but the index is {index}'
OOB_UNREPRESENTABLE_MSG: Final[str] = 'index out of bounds: the index {index} does not fit the platform size type'


if __name__ == '__main__':
    def main() -> None:
        globs = globals().copy()
        for name, value in globs.items():
            if not name.startswith('__') and name.isupper():
                print(f'{name}: {value}')
    main()

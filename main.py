import time
from logging import Logger, getLogger
from typing import Final

import numpy as np

from atipy import OutOfBoundsError, at, at_mut, i128, isize, u32
from atipy.core.util.loggings import LoggerStep, apply_default_config

logger: Final[Logger] = getLogger('atipy.demo')


def main() -> None:
    apply_default_config()
    start_t = time.time()

    with LoggerStep(logger, 'Indexing [1, 2, 3]', 'All done'):
        v = [1, 2, 3]
        logger.info(f'at(v, np.uint8(0)) = {at(v, np.uint8(0))}')
        logger.info(f'at(v, i128(-1)) = {at(v, i128(-1))}')

        at_mut(v, -1).value = 5
        logger.info(f'after at_mut(v, -1).value = 5: {v}')

        for index in (u32(3), isize(-4)):
            try:
                at(v, index)
            except OutOfBoundsError as e:
                logger.info(f'at(v, {index!r}) failed: {e}')

    end_t = time.time()
    dur = end_t - start_t
    print(f'[Start: {time.ctime(start_t)} | End: {time.ctime(end_t)} | Runtime: {dur*1000:.3f}ms]')


if __name__ == '__main__':
    main()

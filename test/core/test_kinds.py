import sys
import unittest

import numpy as np

from atipy.core.kinds import IntKind, TypedIndex, as_int, kind_of, u8, u16, u32, u64, u128, i8, i16, i32, i64, i128, \
    isize


class TestIntKind(unittest.TestCase):

    def test_ranges(self) -> None:
        for kind, min_value, max_value in (
                (IntKind.U8, 0, 255),
                (IntKind.U16, 0, 65535),
                (IntKind.U32, 0, 2 ** 32 - 1),
                (IntKind.U64, 0, 2 ** 64 - 1),
                (IntKind.U128, 0, 2 ** 128 - 1),
                (IntKind.I8, -128, 127),
                (IntKind.I16, -32768, 32767),
                (IntKind.I32, -2 ** 31, 2 ** 31 - 1),
                (IntKind.I64, -2 ** 63, 2 ** 63 - 1),
                (IntKind.I128, -2 ** 127, 2 ** 127 - 1),
                (IntKind.ISize, -sys.maxsize - 1, sys.maxsize),
        ):
            self.assertEqual(kind.min_value, min_value, kind)
            self.assertEqual(kind.max_value, max_value, kind)
            self.assertTrue(kind.contains(min_value))
            self.assertTrue(kind.contains(max_value))
            self.assertFalse(kind.contains(min_value - 1))
            self.assertFalse(kind.contains(max_value + 1))

    def test_unbounded(self) -> None:
        self.assertIsNone(IntKind.Int.bits)
        self.assertIsNone(IntKind.Int.min_value)
        self.assertIsNone(IntKind.Int.max_value)
        self.assertTrue(IntKind.Int.contains(2 ** 1000))
        self.assertTrue(IntKind.Int.signed)

    def test_signedness(self) -> None:
        for kind in (IntKind.U8, IntKind.U16, IntKind.U32, IntKind.U64, IntKind.U128):
            self.assertFalse(kind.signed)
        for kind in (IntKind.I8, IntKind.I16, IntKind.I32, IntKind.I64, IntKind.I128, IntKind.ISize):
            self.assertTrue(kind.signed)


class TestTypedIndex(unittest.TestCase):

    def test_factories(self) -> None:
        for factory, kind in (
                (u8, IntKind.U8), (u16, IntKind.U16), (u32, IntKind.U32), (u64, IntKind.U64), (u128, IntKind.U128),
                (i8, IntKind.I8), (i16, IntKind.I16), (i32, IntKind.I32), (i64, IntKind.I64), (i128, IntKind.I128),
                (isize, IntKind.ISize),
        ):
            index = factory(1)
            self.assertEqual(index.kind, kind)
            self.assertEqual(index.value, 1)
            self.assertEqual(int(index), 1)

    def test_out_of_range(self) -> None:
        with self.assertRaises(OverflowError):
            u8(256)
        with self.assertRaises(OverflowError):
            u64(-1)
        with self.assertRaises(OverflowError):
            i8(-129)
        with self.assertRaises(OverflowError):
            i128(2 ** 127)

    def test_rejects_bool_and_float(self) -> None:
        with self.assertRaises(TypeError):
            u8(True)
        with self.assertRaises(TypeError):
            i32(1.0)

    def test_index_protocol(self) -> None:
        self.assertEqual([10, 20, 30][u8(2)], 30)
        self.assertEqual(TypedIndex('i16', np.int16(-3)), i16(-3))
        self.assertEqual(repr(i128(-1)), '-1i128')


class TestKindOf(unittest.TestCase):

    def test_numpy_scalars(self) -> None:
        for scalar, kind in (
                (np.uint8(1), IntKind.U8),
                (np.uint16(1), IntKind.U16),
                (np.uint32(1), IntKind.U32),
                (np.uint64(1), IntKind.U64),
                (np.int8(-1), IntKind.I8),
                (np.int16(-1), IntKind.I16),
                (np.int32(-1), IntKind.I32),
                (np.int64(-1), IntKind.I64),
        ):
            self.assertEqual(kind_of(scalar), kind)

    def test_builtin_and_typed(self) -> None:
        self.assertEqual(kind_of(-5), IntKind.Int)
        self.assertEqual(kind_of(i128(-5)), IntKind.I128)
        self.assertEqual(as_int(u128(2 ** 100)), (IntKind.U128, 2 ** 100))
        self.assertEqual(as_int(np.int8(-7)), (IntKind.I8, -7))

    def test_index_protocol_objects(self) -> None:
        class Position:
            def __index__(self) -> int:
                return 4

        self.assertEqual(as_int(Position()), (IntKind.Int, 4))

    def test_invalid(self) -> None:
        for index in (True, np.bool_(False), 1.0, '1', None, slice(0, 1), np.timedelta64(1)):
            with self.assertRaises(TypeError):
                kind_of(index)


if __name__ == '__main__':
    unittest.main()

from .kinds import IntKind, TypedIndex, kind_of, as_int, u8, u16, u32, u64, u128, i8, i16, i32, i64, i128, isize

from .normalize import normalize_index

from .at import ElementRef, at, at_mut, try_at

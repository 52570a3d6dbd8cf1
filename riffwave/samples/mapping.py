"""Range-symmetric mapping of sample values between numeric domains.

Negative and non-negative values are scaled independently::

    negative:      (value / source_min) * dest_min
    non-negative:  (value / source_max) * dest_max

so zero maps to zero and each domain's extremes map to the destination's
extremes. Float destinations use -1.0/+1.0 as their extremes. Unsigned 8-bit
input is first centred by subtracting 128.

Each mapping is computed at a fixed float precision (float32 or float64);
the choice is part of the contract because it decides the exact result.
Integer results are truncated toward zero and saturate at the destination
range.
"""

import math

import numpy as np

I8_MIN, I8_MAX = -128, 127
I16_MIN, I16_MAX = -32768, 32767
I24_MIN, I24_MAX = -8388608, 8388607
I32_MIN, I32_MAX = -2147483648, 2147483647
I64_MIN, I64_MAX = -9223372036854775808, 9223372036854775807

U8_CENTER = 128


def _scale(value: int, source: tuple[int, int], dest: tuple[float, float], precision: type):
    v = precision(value)
    if value < 0:
        return (v / precision(source[0])) * precision(dest[0])
    return (v / precision(source[1])) * precision(dest[1])


def _to_int(value, dest: tuple[int, int]) -> int:
    result = float(value)
    if math.isnan(result):
        return 0
    if result <= dest[0]:
        return dest[0]
    if result >= dest[1]:
        return dest[1]
    return int(result)


def _to_f32(value) -> float:
    return float(np.float32(value))


_I8 = (I8_MIN, I8_MAX)
_I16 = (I16_MIN, I16_MAX)
_I24 = (I24_MIN, I24_MAX)
_I32 = (I32_MIN, I32_MAX)
_I64 = (I64_MIN, I64_MAX)
_UNIT = (-1.0, 1.0)


def map_u8_to_i16(value: int) -> int:
    return _to_int(_scale(value - U8_CENTER, _I8, _I16, np.float32), _I16)


def map_u8_to_i32(value: int) -> int:
    return _to_int(_scale(value - U8_CENTER, _I8, _I32, np.float64), _I32)


def map_u8_to_i64(value: int) -> int:
    return _to_int(_scale(value - U8_CENTER, _I8, _I64, np.float64), _I64)


def map_u8_to_f32(value: int) -> float:
    return _to_f32(_scale(value - U8_CENTER, _I8, _UNIT, np.float32))


def map_u8_to_f64(value: int) -> float:
    return float(_scale(value - U8_CENTER, _I8, _UNIT, np.float64))


def map_i16_to_i32(value: int) -> int:
    return _to_int(_scale(value, _I16, _I32, np.float32), _I32)


def map_i16_to_i64(value: int) -> int:
    return _to_int(_scale(value, _I16, _I64, np.float32), _I64)


def map_i16_to_f32(value: int) -> float:
    return _to_f32(_scale(value, _I16, _UNIT, np.float32))


def map_i16_to_f64(value: int) -> float:
    return float(_scale(value, _I16, _UNIT, np.float64))


def map_i24_to_i32(value: int) -> int:
    return _to_int(_scale(value, _I24, _I32, np.float64), _I32)


def map_i24_to_i64(value: int) -> int:
    return _to_int(_scale(value, _I24, _I64, np.float32), _I64)


def map_i24_to_f32(value: int) -> float:
    return _to_f32(_scale(value, _I24, _UNIT, np.float32))


def map_i24_to_f64(value: int) -> float:
    return float(_scale(value, _I24, _UNIT, np.float64))


def map_i32_to_i64(value: int) -> int:
    return _to_int(_scale(value, _I32, _I64, np.float32), _I64)


def map_i32_to_f32(value: int) -> float:
    return _to_f32(_scale(value, _I32, _UNIT, np.float32))


def map_i32_to_f64(value: int) -> float:
    return float(_scale(value, _I32, _UNIT, np.float64))


def map_i64_to_f32(value: int) -> float:
    # Computed in float64, then rounded once to float32
    return _to_f32(_scale(value, _I64, _UNIT, np.float64))


def map_i64_to_f64(value: int) -> float:
    return float(_scale(value, _I64, _UNIT, np.float64))

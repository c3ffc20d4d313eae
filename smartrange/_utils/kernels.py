import numba


# NOTE values beyond int64 are not supported by the compiled kernels

@numba.jit(nopython=True, nogil=True)
def direction(start: int, end: int) -> int:
    if start < end:
        return 1
    if end < start:
        return -1
    return 0

@numba.jit(nopython=True, nogil=True)
def default_step(start: int, end: int) -> int:
    return 1 if start < end else -1

@numba.jit(nopython=True, nogil=True)
def is_valid(start: int, end: int, step: int) -> bool:
    return not (
        (start < end and step < 0)
            or (end < start and step > 0)
    )

# signed: carries the sign of step
@numba.jit(nopython=True, nogil=True)
def length(start: int, end: int, step: int) -> int:
    if not is_valid(start, end, step):
        return 0
    span = abs(end - start)
    stride = abs(step)
    count = -(-span // stride)
    return count if step > 0 else -count

# see https://docs.python.org/3/library/stdtypes.html#common-sequence-operations
@numba.jit(nopython=True, nogil=True)
def position(n: int, i: int) -> int:
    if i >= 0:
        return i if i < n else -1
    return n + i if -i <= n else -1

@numba.jit(nopython=True, nogil=True)
def includes(start: int, end: int, step: int, v: int) -> bool:
    d = direction(start, end)
    if d == 0 or not is_valid(start, end, step):
        return False
    if d > 0:
        within = start <= v and v < end
    else:
        within = end < v and v <= start
    return within and (v - start) % step == 0

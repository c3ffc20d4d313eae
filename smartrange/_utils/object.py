import numbers

import numpy as np


# half of int64 so that any difference of two bounds still fits the kernels
BOUND = int(np.iinfo(np.int64).max) // 2


def is_integer(v) -> bool:
    # bool is an Integral but never a bound or a step
    return isinstance(v, numbers.Integral) and not isinstance(v, bool)

def is_bounded(v) -> bool:
    return -BOUND <= v <= BOUND

def getattrs(o, *attrs):
    return {k: getattr(o, k) for k in attrs}

def format_attrs(o, *attrs) -> str:
    return ', '.join(
        f'{k}={v!r}' for k, v in getattrs(o, *attrs).items()
    )

from __future__ import annotations


import typing
import logging

import numpy as np
import numpy.typing

from .errors import ValidationError, IteratorStateError
from ._utils import kernels
from ._utils.object import BOUND, is_integer, is_bounded, format_attrs


logger = logging.getLogger(__name__)


class IteratorResult(typing.NamedTuple):
    value: typing.Optional[int]
    done: bool

_DONE = IteratorResult(value=None, done=True)


class Range:
    '''
    Lazy, mutable arithmetic progression ``start, start+step, ...``
    bounded by ``end`` (exclusive).

    NOTE ``length`` is signed: it carries the sign of ``step``,
    use ``abs(r.length)`` or ``len(r)`` for the element count.

    >>> r = Range(0, 10, 2)
    >>> list(r)
    [0, 2, 4, 6, 8]
    >>> Range(0, -10, -2).length
    -5
    '''

    def __init__(
        self,
        start: int, end: int,
        step: typing.Optional[int]=None
    ):
        self._validate('start', start)
        self._validate('end', end)
        if step is not None:
            self._validate('step', step)

        self._start = int(start)
        self._end = int(end)
        self._step = self._resolve_step(step)
        # number of values pulled through next()
        self._cursor = 0
        self._engaged = False

    @staticmethod
    def _validate(name: str, v):
        if not is_integer(v):
            raise ValidationError(name, v)
        if not is_bounded(v):
            raise ValidationError(
                name, v, expected=f'within [-{BOUND}, {BOUND}]'
            )

    def _resolve_step(self, step: typing.Optional[int]) -> int:
        if step is None or step == 0:
            step = kernels.default_step(self._start, self._end)
            logger.debug(
                'step defaults to %d for start=%d end=%d',
                step, self._start, self._end
            )
        return int(step)

    @property
    def start(self) -> int:
        return self._start

    @start.setter
    def start(self, v: int):
        self._validate('start', v)
        if v == self._start:
            return
        self._start = int(v)

    @property
    def end(self) -> int:
        return self._end

    @end.setter
    def end(self, v: int):
        self._validate('end', v)
        if v == self._end:
            return
        self._end = int(v)

    @property
    def step(self) -> int:
        return self._step

    @step.setter
    def step(self, v: typing.Optional[int]):
        if v is not None:
            self._validate('step', v)
        step = self._resolve_step(v)
        if step == self._step:
            return
        if self._engaged:
            logger.debug(
                '%r: rejected step %d at cursor %d',
                self, step, self._cursor
            )
            raise IteratorStateError(
                f'''cannot change step of {self!r} '''
                f'''after next() was called, reset() first'''
            )
        self._step = step

    @property
    def valid(self) -> bool:
        return kernels.is_valid(self._start, self._end, self._step)

    @property
    def length(self) -> int:
        return kernels.length(self._start, self._end, self._step)

    def __len__(self) -> int:
        return abs(self.length)

    # pull-based protocol, shares the cursor
    def next(self) -> IteratorResult:
        self._engaged = True
        if self._cursor < len(self):
            value = self._start + self._cursor * self._step
            self._cursor += 1
            return IteratorResult(value=value, done=False)
        return _DONE

    def reset(self) -> IteratorResult:
        logger.debug('%r: cursor reset from %d', self, self._cursor)
        self._cursor = 0
        self._engaged = False
        return _DONE

    def produce(self) -> typing.Iterator[int]:
        '''
        Yield the values of the range independently of the cursor.
        Every call starts over from ``start``.
        '''
        start, end, step = self._start, self._end, self._step
        if not kernels.is_valid(start, end, step):
            return

        value = start
        if start < end:
            while value < end:
                yield value
                value += step
        else:
            while value > end:
                yield value
                value += step

    def __iter__(self) -> typing.Iterator[int]:
        return self.produce()

    def at(self, i: int) -> typing.Optional[int]:
        '''
        Python-style indexing, ``-len(r) <= i < len(r)``.
        Returns ``None`` when ``i`` is out of bounds or not an integer.
        '''
        if not is_integer(i):
            return None
        n = len(self)
        if not -n <= i < n:
            return None
        pos = kernels.position(n, int(i))
        if pos < 0:
            return None
        return self._start + pos * self._step

    def includes(self, v: int) -> bool:
        if not is_integer(v):
            return False
        # outside the span, never a member
        if not min(self._start, self._end) <= v <= max(self._start, self._end):
            return False
        return kernels.includes(
            self._start, self._end, self._step, int(v)
        )

    def __contains__(self, v) -> bool:
        return self.includes(v)

    def map(
        self,
        fn: typing.Callable[[int, int], typing.Any]
    ) -> typing.List[typing.Any]:
        return [fn(v, i) for i, v in enumerate(self.produce())]

    def to_array(self) -> np.typing.NDArray[np.int64]:
        if not self.valid:
            return np.empty(0, dtype=np.int64)
        return np.arange(
            self._start, self._end, self._step,
            dtype=np.int64
        )

    def __array__(self, dtype=None, copy=None):
        if copy is False:
            raise ValueError(
                f'''{type(self).__name__} cannot be viewed as an array without a copy'''
            )
        a = self.to_array()
        return a if dtype is None else a.astype(dtype)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return (
            (self._start, self._end, self._step)
                == (other._start, other._end, other._step)
        )

    # mutable
    __hash__ = None

    def __repr__(self) -> str:
        attrs = format_attrs(self, 'start', 'end', 'step')
        return f'{type(self).__name__}({attrs})'


__all__ = [
    'IteratorResult',
    'Range'
]

from __future__ import annotations


import typing
import numbers

from .range import Range
from ._utils.object import format_attrs


# members of the wrapped Range reachable through a View
MEMBERS = frozenset([
    'start', 'end', 'step', 'length',
    'next', 'reset', 'includes', 'at', 'map'
])
WRITABLE = frozenset(['start', 'end', 'step'])


def _is_numeric(key) -> bool:
    return isinstance(key, numbers.Number) and not isinstance(key, bool)


class View:
    '''
    Indexable, iterable facade over a :class:`Range`.

    Numeric keys resolve through ``Range.at``, numeric membership
    through ``Range.includes``, anything else through the named
    members of the wrapped range.

    >>> v = View(150, 160, 2)
    >>> 150 in v, 151 in v
    (True, False)
    >>> v[0], v[-1], v[5]
    (150, 158, None)
    >>> v['step']
    2
    '''

    __slots__ = ('_range',)

    def __init__(
        self,
        start: int, end: int,
        step: typing.Optional[int]=None
    ):
        object.__setattr__(self, '_range', Range(start, end, step))

    @classmethod
    def wrap(cls, r: Range) -> View:
        if not isinstance(r, Range):
            raise TypeError(
                f'''can only wrap a Range, got {type(r).__name__}'''
            )
        self = cls.__new__(cls)
        object.__setattr__(self, '_range', r)
        return self

    # slots state would be restored through the guarded __setattr__
    def __reduce__(self):
        return (type(self).wrap, (self._range,))

    @property
    def target(self) -> Range:
        return self._range

    def __getattr__(self, name: str):
        if name in MEMBERS:
            return getattr(self._range, name)
        raise AttributeError(
            f'''{type(self).__name__!r} object has no attribute {name!r}'''
        )

    def __setattr__(self, name: str, value):
        if name not in WRITABLE:
            raise AttributeError(
                f'''cannot set {name!r}, writable: {sorted(WRITABLE)}'''
            )
        setattr(self._range, name, value)

    def __getitem__(self, key):
        if _is_numeric(key):
            return self._range.at(key)
        if isinstance(key, str) and key in MEMBERS:
            return getattr(self._range, key)
        raise KeyError(key)

    def __setitem__(self, key, value):
        if not (isinstance(key, str) and key in WRITABLE):
            raise KeyError(key)
        setattr(self._range, key, value)

    def __contains__(self, key) -> bool:
        if _is_numeric(key):
            return self._range.includes(key)
        if isinstance(key, str):
            return key in MEMBERS
        return False

    def __iter__(self) -> typing.Iterator[int]:
        return self._range.produce()

    def __len__(self) -> int:
        return len(self._range)

    def __array__(self, dtype=None, copy=None):
        return self._range.__array__(dtype=dtype, copy=copy)

    def __dir__(self):
        return sorted(MEMBERS | {'target'})

    def __repr__(self) -> str:
        attrs = format_attrs(self._range, 'start', 'end', 'step')
        return f'{type(self).__name__}({attrs})'


wrap = View.wrap


__all__ = [
    'View',
    'wrap'
]

import collections as coll
import collections.abc

from ..range import Range

_builtin_sorted = sorted
_builtin_reversed = reversed


def _copy(r: Range) -> Range:
    return type(r)(r.start, r.end, r.step)

def reversed(a):
    '''
    Reverse a :class:`Range` into a new one producing the same values
    backwards; other sequences go through the builtin.

    >>> list(reversed(Range(0, 10, 3)))
    [9, 6, 3, 0]
    '''
    def _impl_range(r: Range) -> Range:
        n = len(r)
        if n == 0:
            return type(r)(r.start, r.start, -r.step)
        last = r.start + (n - 1) * r.step
        return type(r)(last, r.start - r.step, -r.step)

    if isinstance(a, Range):
        return _impl_range(a)
    return _builtin_reversed(a)

def sorted(a: coll.abc.Iterable, ascending=True):
    def _impl_range(r: Range, ascending=True):
        def _is_ascending(r: Range): return r.step > 0

        if len(r) > 1 and _is_ascending(r) != ascending:
            return reversed(r)
        return _copy(r)

    if isinstance(a, Range):
        return _impl_range(a, ascending=ascending)
    return _builtin_sorted(a, reverse=not ascending)


__all__ = [
    'sorted',
    'reversed'
]

from .errors import (
    SmartRangeError,
    ValidationError,
    IteratorStateError
)
from .range import IteratorResult, Range
from .view import View, wrap

__version__ = '1.0.0'

__all__ = [
    'SmartRangeError',
    'ValidationError',
    'IteratorStateError',
    'IteratorResult',
    'Range',
    'View',
    'wrap'
]

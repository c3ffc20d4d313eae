class SmartRangeError(Exception):
    pass

class ValidationError(SmartRangeError, TypeError):
    def __init__(self, name: str, value, expected: str='an integer'):
        super().__init__(
            f'''{name} must be {expected}, got {value!r}'''
        )
        self.name = name
        self.value = value

class IteratorStateError(SmartRangeError, RuntimeError):
    pass


__all__ = [
    'SmartRangeError',
    'ValidationError',
    'IteratorStateError'
]

__docformat__ = 'google'

__all__ = [
    'InvalidOperationResult'
]

class InvalidOperationResult(TypeError):
    """
    Raised when a callable passed to `wordkit.Word.apply` does not return a string.

    Args:
        result: The value the callable returned
    """
    def __init__(self, result):
        self.result = result
        super().__init__(
            f'The operation must return a string, got {type(result).__name__}: {result!r}'
        )

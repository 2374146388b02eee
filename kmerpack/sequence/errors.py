"""
Error types raised by the packed sequence codec.

All of these are ordinary validation failures: they are raised to the
caller and can be handled, nothing in the codec aborts on bad input.
"""


class CodecError(ValueError):
    """Base class for packed sequence errors."""
    pass


class InvalidSymbolError(CodecError):
    """Raised when a character outside the A/G/C/T alphabet is encoded."""
    def __init__(self, position: int, found: str):
        self.position = position
        self.found = found
        super().__init__(f"Invalid nucleotide {found!r} at position {position}")


class IndexOutOfRangeError(CodecError, IndexError):
    """Raised when a symbol position is not below the declared length."""
    def __init__(self, position: int, length: int):
        self.position = position
        self.length = length
        super().__init__(f"Position {position} out of range for {length}-mer")


class LengthMismatchError(CodecError):
    """Raised when two lengths that must agree do not."""
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected length {expected}, got {actual}")

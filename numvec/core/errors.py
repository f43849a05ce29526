"""
Errors -- Exception taxonomy for numvec

Two failure kinds surface from the vector layer:
- UnsupportedOperation: structural mutation of a fixed-size vector
- InvalidArgument: bad destination or range on bulk copy-out

Layout and rendering never raise on width/row pressure.
Equality and hashing never raise.
"""


class VectorError(Exception):
    """Base class for all numvec errors."""


class UnsupportedOperation(VectorError, TypeError):
    """
    Raised when a call would change the length of a fixed-size vector.

    Insert, remove and add are never supported. The vector is left unchanged.
    """

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            f"'{operation}' is not supported: vectors have a fixed size"
        )


class InvalidArgument(VectorError, ValueError):
    """
    Raised when an argument is rejected before any work is done.

    Carries the offending parameter name for callers that report it.
    """

    def __init__(self, message: str, param: str = None):
        self.param = param
        if param:
            message = f"{message} (parameter '{param}')"
        super().__init__(message)

"""
Exceptions raised by pya2s
"""


class A2SError(Exception):
    """Base exception for all query errors"""
    pass


class NotConnectedError(A2SError):
    """Raised when a query is issued without an open connection"""

    def __init__(self, message: str = "not connected to server"):
        super().__init__(message)


class A2SConnectionError(A2SError):
    """Raised when the socket cannot be opened, written or read"""
    pass


class QueryTimeoutError(A2SError):
    """Raised when the server does not answer before the deadline"""

    def __init__(self, message: str = "request timeout"):
        super().__init__(message)


class ShortResponseError(A2SError):
    """Raised when a response is shorter than a required fixed block"""

    def __init__(self, message: str = "response too short"):
        super().__init__(message)


class InvalidResponseError(A2SError):
    """Raised when a response cannot be framed"""

    def __init__(self, message: str = "invalid response"):
        super().__init__(message)


class UnknownHeaderError(InvalidResponseError):
    """Raised when a datagram carries neither the single nor the split header"""

    def __init__(self, header: int):
        self.header = header
        super().__init__(f"unknown header: 0x{header:X}")


class ProtocolMismatchError(A2SError):
    """Raised when the response type byte differs from the expected one"""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"unexpected response type: 0x{actual:X}, expected: 0x{expected:X}")


class ChallengeRequiredError(A2SError):
    """Signal that the server answered with a challenge number.

    Consumed by the client's retry logic; callers of the public
    operations never see it.
    """

    def __init__(self, challenge: int):
        self.challenge = challenge
        super().__init__("challenge required")


class ChallengeNotReceivedError(A2SError):
    """Raised when the challenge probe finished without yielding a challenge"""

    def __init__(self, message: str = "challenge not received"):
        super().__init__(message)


class TooManyRetriesError(A2SError):
    """Raised when the server keeps asking for a challenge"""

    def __init__(self, message: str = "too many retries"):
        super().__init__(message)


class UnsupportedFeatureError(A2SError):
    """Raised for query types this client does not implement"""

    def __init__(self, message: str = "unsupported feature"):
        super().__init__(message)

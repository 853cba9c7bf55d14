"""Exception hierarchy for the one-time signature scheme."""

from __future__ import annotations


class WotsError(Exception):
    """
    Base exception for all scheme errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidParameterError(WotsError, ValueError):
    """
    Raised when the scheme parameters cannot produce secure keys.

    Attributes:
        name: The offending parameter.
        value: The value it was given.
    """

    def __init__(self, name: str, value: object, detail: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"invalid {name} {value!r}: {detail}")


class InvalidKeySizeError(WotsError, ValueError):
    """
    Raised when private key material has the wrong length.

    Attributes:
        expected: The private key size required by the scheme.
        actual: The size that was supplied.
    """

    def __init__(self, *, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"private key must be exactly {expected} bytes, got {actual}")


class RandomSourceError(WotsError):
    """
    Raised when the random source cannot supply enough bytes.

    Attributes:
        requested: The number of bytes asked for.
        received: The number of bytes actually obtained.
    """

    def __init__(self, *, requested: int, received: int, detail: str | None = None) -> None:
        self.requested = requested
        self.received = received

        msg = f"random source returned {received} of {requested} bytes"
        if detail:
            msg = f"{msg}: {detail}"

        super().__init__(msg)


class KeyConsumedError(WotsError):
    """Raised when a private key that already signed a message is used again."""

    def __init__(self) -> None:
        super().__init__("private key was already used to sign a message")

class CodecError(Exception):
    """Base class for every instruction codec failure."""


class DecodeError(CodecError):
    """The binary form could not be turned back into a record."""


class TruncatedInput(DecodeError):
    """Input ended before a field was fully read."""


class TrailingBytes(DecodeError):
    """Bytes remained after a complete record was decoded."""


class InvalidFlag(DecodeError):
    """A signer/writable flag byte was neither 0 nor 1."""


class InvalidEncoding(CodecError):
    """Text is not valid unpadded base64."""


class RoundTripMismatch(CodecError):
    """Decoded instruction differs from the one that was encoded."""

    def __init__(self, expected, actual) -> None:
        super().__init__(f"Round trip mismatch: expected {expected!r}, got {actual!r}")
        self.expected = expected
        self.actual = actual

from .adapter import from_native, to_native
from .binary import from_binary, to_binary
from .errors import (
    CodecError,
    DecodeError,
    InvalidEncoding,
    InvalidFlag,
    RoundTripMismatch,
    TrailingBytes,
    TruncatedInput,
)
from .pipeline import decode_instruction, decode_record, encode_instruction, verify_round_trip
from .schema import AccountRef, InstructionRecord
from .transport import from_text, to_text

__all__ = [
    "AccountRef",
    "InstructionRecord",
    "from_native",
    "to_native",
    "to_binary",
    "from_binary",
    "to_text",
    "from_text",
    "encode_instruction",
    "decode_instruction",
    "decode_record",
    "verify_round_trip",
    "CodecError",
    "DecodeError",
    "TruncatedInput",
    "TrailingBytes",
    "InvalidFlag",
    "InvalidEncoding",
    "RoundTripMismatch",
]

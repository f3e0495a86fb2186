"""Native instruction <-> base64 text, with a round-trip self-check."""

import logging
from typing import Any, Optional

from .adapter import NativeFactory, NativeInstruction, from_native, to_native
from .binary import from_binary, to_binary
from .errors import RoundTripMismatch
from .schema import InstructionRecord
from .transport import from_text, to_text

logger = logging.getLogger(__name__)


def encode_instruction(instruction: NativeInstruction, verify: bool = True) -> str:
    """Encode an instruction to unpadded base64.

    With ``verify`` the text is decoded again and compared to ``instruction``
    before it is returned.
    """
    record = from_native(instruction)
    raw = to_binary(record)
    logger.debug(
        "Encoded instruction: %d accounts, %d payload bytes, %d total bytes",
        len(record.accounts),
        len(record.payload),
        len(raw),
    )
    text = to_text(raw)
    if verify:
        verify_round_trip(instruction, text)
    return text


def decode_record(text: str) -> InstructionRecord:
    raw = from_text(text)
    logger.debug("Decoding %d bytes", len(raw))
    return from_binary(raw)


def decode_instruction(text: str, factory: Optional[NativeFactory] = None) -> Any:
    return to_native(decode_record(text), factory)


def verify_round_trip(instruction: NativeInstruction, text: str) -> None:
    """Raise RoundTripMismatch unless ``text`` decodes back to ``instruction``."""
    expected = from_native(instruction)
    actual = from_native(decode_instruction(text))
    if actual != expected:
        logger.error("Round trip mismatch for processor %s", expected.processor_id.hex())
        raise RoundTripMismatch(expected, actual)
    logger.debug("Round trip verified")

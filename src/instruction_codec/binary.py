"""Borsh-compatible binary layout for :class:`InstructionRecord`.

processor_id (32) | u32 count, accounts (32 + 1 + 1 each) | u32 len, payload
"""

import io

from borsh_construct import CStruct, U8, U32, Vec
from construct import Bytes, GreedyBytes, Mapping, MappingError, Prefixed, StreamError

from .errors import InvalidFlag, TrailingBytes, TruncatedInput
from .schema import ADDRESS_LEN, AccountRef, InstructionRecord

# Only 0 and 1 are accepted for flags so that decoding stays a bijection.
Flag = Mapping(U8, {False: 0, True: 1})
Address = Bytes(ADDRESS_LEN)

ACCOUNT_LAYOUT = CStruct(
    "address" / Address,
    "is_signer" / Flag,
    "is_writable" / Flag,
)

INSTRUCTION_LAYOUT = CStruct(
    "processor_id" / Address,
    "accounts" / Vec(ACCOUNT_LAYOUT),
    "payload" / Prefixed(U32, GreedyBytes),
)


def to_binary(record: InstructionRecord) -> bytes:
    """Serialize a record in declared field order."""
    return INSTRUCTION_LAYOUT.build(
        {
            "processor_id": record.processor_id,
            "accounts": [
                {
                    "address": acc.address,
                    "is_signer": acc.is_signer,
                    "is_writable": acc.is_writable,
                }
                for acc in record.accounts
            ],
            "payload": record.payload,
        }
    )


def from_binary(data: bytes) -> InstructionRecord:
    """Parse exactly one record from ``data``.

    Raises TruncatedInput, TrailingBytes or InvalidFlag.
    """
    stream = io.BytesIO(data)
    try:
        parsed = INSTRUCTION_LAYOUT.parse_stream(stream)
    except StreamError as exc:
        raise TruncatedInput(f"Input ended early: {exc}") from exc
    except MappingError as exc:
        raise InvalidFlag(f"Flag byte must be 0 or 1: {exc}") from exc
    leftover = len(data) - stream.tell()
    if leftover:
        raise TrailingBytes(f"{leftover} unread bytes after payload")
    return InstructionRecord(
        processor_id=parsed.processor_id,
        accounts=[
            AccountRef(address=acc.address, is_signer=acc.is_signer, is_writable=acc.is_writable)
            for acc in parsed.accounts
        ],
        payload=parsed.payload,
    )

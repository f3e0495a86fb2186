"""Bridge between SDK instruction values and :class:`InstructionRecord`."""

from typing import Any, Callable, List, Optional, Protocol, Sequence

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from .schema import AccountRef, InstructionRecord


class NativeAccount(Protocol):
    pubkey: Any
    is_signer: bool
    is_writable: bool


class NativeInstruction(Protocol):
    """Any instruction value exposing a program id, account metas and data."""

    program_id: Any
    accounts: Sequence[NativeAccount]
    data: bytes


NativeFactory = Callable[[bytes, List[AccountRef], bytes], Any]


def from_native(instruction: NativeInstruction) -> InstructionRecord:
    """Copy an SDK instruction into the canonical record."""
    accounts = [
        AccountRef(
            address=bytes(meta.pubkey),
            is_signer=meta.is_signer,
            is_writable=meta.is_writable,
        )
        for meta in instruction.accounts
    ]
    return InstructionRecord(
        processor_id=bytes(instruction.program_id),
        accounts=accounts,
        payload=bytes(instruction.data),
    )


def solders_instruction(program_id: bytes, accounts: List[AccountRef], data: bytes) -> Instruction:
    metas = [
        AccountMeta(pubkey=Pubkey(acc.address), is_signer=acc.is_signer, is_writable=acc.is_writable)
        for acc in accounts
    ]
    return Instruction(program_id=Pubkey(program_id), accounts=metas, data=data)


def to_native(record: InstructionRecord, factory: Optional[NativeFactory] = None) -> Any:
    """Rebuild an SDK instruction from a record.

    ``factory`` receives ``(program_id, accounts, data)`` and defaults to
    building a solders ``Instruction``.
    """
    build = factory or solders_instruction
    return build(record.processor_id, list(record.accounts), record.payload)

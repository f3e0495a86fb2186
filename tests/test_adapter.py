import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from types import SimpleNamespace

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from instruction_codec.adapter import from_native, to_native
from instruction_codec.schema import AccountRef, InstructionRecord


def _instruction():
    signer, writable, readonly = Pubkey.new_unique(), Pubkey.new_unique(), Pubkey.new_unique()
    return Instruction(
        program_id=Pubkey.new_unique(),
        accounts=[
            AccountMeta(pubkey=signer, is_signer=True, is_writable=True),
            AccountMeta(pubkey=writable, is_signer=False, is_writable=True),
            AccountMeta(pubkey=readonly, is_signer=False, is_writable=False),
        ],
        data=b"\x00\x01\x02payload",
    )


def test_from_native_copies_fields():
    ix = _instruction()
    record = from_native(ix)
    assert record.processor_id == bytes(ix.program_id)
    assert record.payload == b"\x00\x01\x02payload"
    assert [acc.address for acc in record.accounts] == [bytes(m.pubkey) for m in ix.accounts]
    assert [(acc.is_signer, acc.is_writable) for acc in record.accounts] == [
        (True, True),
        (False, True),
        (False, False),
    ]


def test_solders_round_trip():
    ix = _instruction()
    assert to_native(from_native(ix)) == ix


def test_any_instruction_shape():
    native = SimpleNamespace(
        program_id=bytes([7]) * 32,
        accounts=[SimpleNamespace(pubkey=bytes([8]) * 32, is_signer=False, is_writable=True)],
        data=b"",
    )
    record = from_native(native)
    assert record == InstructionRecord(bytes([7]) * 32, [AccountRef(bytes([8]) * 32, False, True)])


def test_custom_factory():
    record = InstructionRecord(bytes([1]) * 32, [AccountRef(bytes([2]) * 32, True)], b"x")
    built = to_native(record, lambda pid, accs, data: (pid, accs, data))
    assert built == (bytes([1]) * 32, [AccountRef(bytes([2]) * 32, True)], b"x")

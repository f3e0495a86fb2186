import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

import pytest

from instruction_codec.schema import AccountRef, InstructionRecord


def test_record_equality_is_structural():
    a = AccountRef(bytes([2]) * 32, is_signer=True)
    b = AccountRef(bytearray([2] * 32), is_signer=True, is_writable=False)
    assert a == b
    r1 = InstructionRecord(bytes([1]) * 32, [a], bytearray(b"\xaa"))
    r2 = InstructionRecord(bytes([1]) * 32, (b,), b"\xaa")
    assert r1 == r2
    assert isinstance(r1.accounts, tuple)
    assert isinstance(r1.payload, bytes)


def test_account_order_is_part_of_equality():
    a = AccountRef(bytes([2]) * 32)
    b = AccountRef(bytes([3]) * 32)
    assert InstructionRecord(bytes(32), [a, b]) != InstructionRecord(bytes(32), [b, a])


def test_records_are_immutable():
    record = InstructionRecord(bytes(32))
    with pytest.raises(AttributeError):
        record.payload = b"x"


def test_identifier_width_enforced():
    with pytest.raises(ValueError):
        AccountRef(bytes(31))
    with pytest.raises(ValueError):
        InstructionRecord(bytes(33))


def test_encoded_size():
    record = InstructionRecord(bytes(32), [AccountRef(bytes(32))], b"\xaa\xbb")
    assert record.encoded_size() == 76
    assert InstructionRecord(bytes(32)).encoded_size() == 40

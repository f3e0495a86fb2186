from dataclasses import dataclass
from typing import Tuple

ADDRESS_LEN = 32
ACCOUNT_LEN = ADDRESS_LEN + 2
LENGTH_PREFIX_LEN = 4


def _address(value: bytes, name: str) -> bytes:
    value = bytes(value)
    if len(value) != ADDRESS_LEN:
        raise ValueError(f"{name} must be {ADDRESS_LEN} bytes, got {len(value)}")
    return value


@dataclass(frozen=True)
class AccountRef:
    address: bytes
    is_signer: bool = False
    is_writable: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", _address(self.address, "address"))
        object.__setattr__(self, "is_signer", bool(self.is_signer))
        object.__setattr__(self, "is_writable", bool(self.is_writable))


@dataclass(frozen=True)
class InstructionRecord:
    """Canonical instruction: processor id, ordered accounts, opaque payload.

    Accounts are positional, so their order is part of the value.
    """

    processor_id: bytes
    accounts: Tuple[AccountRef, ...] = ()
    payload: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "processor_id", _address(self.processor_id, "processor_id"))
        object.__setattr__(self, "accounts", tuple(self.accounts))
        object.__setattr__(self, "payload", bytes(self.payload))

    def encoded_size(self) -> int:
        """Length of the binary form of this record."""
        return (
            ADDRESS_LEN
            + LENGTH_PREFIX_LEN
            + ACCOUNT_LEN * len(self.accounts)
            + LENGTH_PREFIX_LEN
            + len(self.payload)
        )

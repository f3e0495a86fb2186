from typing import Optional, Tuple

from borsh_construct import U32
from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

BPF_LOADER_UPGRADEABLE_ID = Pubkey.from_string("BPFLoaderUpgradeab1e11111111111111111111111")
SYSVAR_RENT_ID = Pubkey.from_string("SysvarRent111111111111111111111111111111111")
SYSVAR_CLOCK_ID = Pubkey.from_string("SysvarC1ock11111111111111111111111111111111")

# Variant index of Upgrade in the loader's instruction enum.
UPGRADE_VARIANT = 3


def program_data_address(program: Pubkey) -> Tuple[Pubkey, int]:
    """PDA holding the executable data of an upgradeable program."""
    return Pubkey.find_program_address([bytes(program)], BPF_LOADER_UPGRADEABLE_ID)


def build_upgrade_instruction(
    program: Pubkey,
    buffer: Pubkey,
    authority: Pubkey,
    spill: Optional[Pubkey] = None,
) -> Instruction:
    """Build the loader instruction replacing ``program`` with ``buffer``.

    Accounts:
    0. program data (writable)
    1. program (writable)
    2. buffer (writable)
    3. spill (writable), receives the buffer's lamports
    4. rent sysvar
    5. clock sysvar
    6. authority (signer)
    """
    programdata, _ = program_data_address(program)
    accounts = [
        AccountMeta(pubkey=programdata, is_signer=False, is_writable=True),
        AccountMeta(pubkey=program, is_signer=False, is_writable=True),
        AccountMeta(pubkey=buffer, is_signer=False, is_writable=True),
        AccountMeta(pubkey=authority if spill is None else spill, is_signer=False, is_writable=True),
        AccountMeta(pubkey=SYSVAR_RENT_ID, is_signer=False, is_writable=False),
        AccountMeta(pubkey=SYSVAR_CLOCK_ID, is_signer=False, is_writable=False),
        AccountMeta(pubkey=authority, is_signer=True, is_writable=False),
    ]
    data = U32.build(UPGRADE_VARIANT)
    return Instruction(program_id=BPF_LOADER_UPGRADEABLE_ID, accounts=accounts, data=data)

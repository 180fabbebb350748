"""
Multisig account decoders.

Two account versions are in use by the program:
- v1 keeps owner addresses and owner names in two index-aligned arrays
- v2 keeps a fixed-capacity array of {address, name} slots where unused
  slots hold the default (all-zero) address

Both decoders are fallible: any failure is logged and None is returned so
that partially initialized accounts can be skipped by the caller.
"""

from typing import Any, List, Optional

from solders.pubkey import Pubkey

from ..log import get_logger
from ..models import MultisigInfo, MultisigParticipant
from .codec import DEFAULT_PUBKEY, decode_text, epoch_to_datetime, to_pubkey

logger = get_logger(__name__)


async def find_multisig_authority(multisig_id: Pubkey, program_id: Pubkey) -> Pubkey:
    """Derive the PDA that signs on behalf of the multisig."""
    authority, _bump = Pubkey.find_program_address([bytes(multisig_id)], program_id)
    return authority


def _v1_owners(account: dict) -> List[MultisigParticipant]:
    names = account.get("owners_names") or []
    owners = []
    for i, address in enumerate(account["owners"]):
        name = decode_text(names[i]) if i < len(names) else ""
        owners.append(MultisigParticipant(address=str(to_pubkey(address)), name=name))
    return owners


def _v2_owners(account: dict) -> List[MultisigParticipant]:
    owners = []
    for slot in account["owners"]:
        address = to_pubkey(slot["address"])
        if address == DEFAULT_PUBKEY:
            continue
        owners.append(MultisigParticipant(address=str(address), name=decode_text(slot.get("name"))))
    return owners


async def _parse_multisig_account(program_id: Pubkey, info: Any, owners_decoder) -> MultisigInfo:
    account = info.account
    multisig_id = to_pubkey(info.public_key)
    authority = await find_multisig_authority(multisig_id, to_pubkey(program_id))

    return MultisigInfo(
        id=multisig_id,
        version=int(account.get("version", 0)),
        label=decode_text(account.get("label")),
        authority=authority,
        nonce=int(account.get("nonce", 0)),
        owner_seq_number=int(account["owner_set_seqno"]),
        threshold=int(account["threshold"]),
        pending_txs_amount=int(account["pending_txs"]),
        created_on_utc=epoch_to_datetime(account["created_on"]),
        owners=owners_decoder(account),
    )


async def parse_multisig_v1_account(program_id: Pubkey, info: Any) -> Optional[MultisigInfo]:
    """
    Decode a version 1 multisig account.

    Args:
        program_id: Multisig program id
        info: Raw account record (public_key, account)

    Returns:
        MultisigInfo, or None if the account could not be decoded
    """
    try:
        return await _parse_multisig_account(program_id, info, _v1_owners)
    except Exception as e:
        logger.error(
            "multisig_account_parse_failed",
            version=1,
            account=str(getattr(info, "public_key", None)),
            error=str(e),
        )
        return None


async def parse_multisig_v2_account(program_id: Pubkey, info: Any) -> Optional[MultisigInfo]:
    """
    Decode a version 2 multisig account.

    Empty owner slots are dropped.

    Args:
        program_id: Multisig program id
        info: Raw account record (public_key, account)

    Returns:
        MultisigInfo, or None if the account could not be decoded
    """
    try:
        return await _parse_multisig_account(program_id, info, _v2_owners)
    except Exception as e:
        logger.error(
            "multisig_account_parse_failed",
            version=2,
            account=str(getattr(info, "public_key", None)),
            error=str(e),
        )
        return None


async def parse_multisig_account(program_id: Pubkey, info: Any, version: int) -> Optional[MultisigInfo]:
    """Dispatch on the account version."""
    if version == 1:
        return await parse_multisig_v1_account(program_id, info)
    return await parse_multisig_v2_account(program_id, info)

"""Transaction and transaction detail decoders."""

from typing import Any, Mapping, Optional

from ..core.status import get_transaction_status
from ..errors import MultisigError, TRANSACTION, TRANSACTION_DETAIL
from ..models import (
    MultisigInfo,
    MultisigTransaction,
    MultisigTransactionDetail,
    TransactionAccount,
)
from .codec import decode_text, epoch_to_datetime, expiration_to_datetime, to_bytes, to_pubkey


def _transaction_account(raw: Any) -> TransactionAccount:
    if isinstance(raw, TransactionAccount):
        return raw
    return TransactionAccount(
        pubkey=to_pubkey(raw["pubkey"]),
        is_signer=bool(raw.get("is_signer", False)),
        is_writable=bool(raw.get("is_writable", False)),
    )


def parse_multisig_transaction_detail(
    tx_detail_info: Optional[Mapping[str, Any]],
) -> MultisigTransactionDetail:
    """
    Decode a transaction detail account.

    A missing account yields empty text and no expiration.

    Raises:
        MultisigError: the account is malformed
    """
    try:
        if not tx_detail_info:
            return MultisigTransactionDetail()

        expiration = int(tx_detail_info.get("expiration_date") or 0)

        return MultisigTransactionDetail(
            title=decode_text(tx_detail_info.get("title")),
            description=decode_text(tx_detail_info.get("description")),
            expiration_date=expiration_to_datetime(expiration) if expiration > 0 else None,
        )
    except Exception as e:
        raise MultisigError(TRANSACTION_DETAIL, e) from e


def parse_multisig_transaction(
    multisig: MultisigInfo,
    owner: Any,
    tx_info: Any,
    tx_detail_info: Optional[Mapping[str, Any]],
) -> MultisigTransaction:
    """
    Decode a transaction account as seen by one of the multisig owners.

    Args:
        multisig: Decoded multisig the transaction belongs to
        owner: Address of the querying owner, used for did_signed
        tx_info: Raw transaction record (public_key, account)
        tx_detail_info: Raw transaction detail account, if any

    Raises:
        MultisigError: any field could not be decoded
    """
    try:
        account = tx_info.account
        signers = [bool(s) for s in account["signers"]]

        owner_address = str(to_pubkey(owner))
        owner_index = next(
            (i for i, o in enumerate(multisig.owners) if o.address == owner_address),
            -1,
        )
        did_signed = 0 <= owner_index < len(signers) and signers[owner_index]

        executed_on = account.get("executed_on")
        pda_timestamp = account.get("pda_timestamp")
        proposer = account.get("proposer")
        pda_bump = account.get("pda_bump")

        return MultisigTransaction(
            id=tx_info.public_key,
            multisig=to_pubkey(account["multisig"]),
            program_id=to_pubkey(account["program_id"]),
            signers=signers,
            owner_seq_number=int(account["owner_set_seqno"]),
            created_on=epoch_to_datetime(account["created_on"]),
            executed_on=(
                epoch_to_datetime(executed_on)
                if executed_on and int(executed_on) > 0
                else None
            ),
            status=get_transaction_status(multisig, tx_info, tx_detail_info),
            operation=int(account.get("operation") or 0),
            accounts=[_transaction_account(a) for a in account.get("accounts", [])],
            did_signed=did_signed,
            proposer=to_pubkey(proposer) if proposer else None,
            pda_timestamp=int(pda_timestamp) if pda_timestamp else None,
            pda_bump=int(pda_bump) if pda_bump is not None else None,
            data=to_bytes(account.get("data")),
            details=parse_multisig_transaction_detail(tx_detail_info),
        )
    except Exception as e:
        raise MultisigError(TRANSACTION, e) from e

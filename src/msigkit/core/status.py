"""Transaction status resolution."""

import time
from typing import Any, Mapping, Optional

from ..errors import MultisigError, TRANSACTION_STATUS
from ..models import MultisigInfo, MultisigTransactionStatus


def get_transaction_status(
    multisig: Optional[MultisigInfo],
    info: Any,
    detail: Optional[Mapping[str, Any]],
    now: Optional[float] = None,
) -> MultisigTransactionStatus:
    """
    Derive the status of a transaction proposal.

    Rules are checked in order and the first match wins:
    executed, expired, approved, voided, pending.

    Args:
        multisig: Decoded multisig the transaction belongs to
        info: Raw transaction record (public_key, account)
        detail: Raw transaction detail account, if any
        now: Current time in seconds since epoch (defaults to wall-clock)

    Raises:
        MultisigError: multisig is missing or the records are malformed
    """
    try:
        if multisig is None:
            raise ValueError("Invalid parameter: 'multisig'")

        account = info.account
        executed_on = account.get("executed_on")
        if executed_on and int(executed_on) > 0:
            return MultisigTransactionStatus.EXECUTED

        expiration = int(detail.get("expiration_date") or 0) if detail else 0
        now_ms = (time.time() if now is None else now) * 1000
        if expiration > 0 and expiration * 1000 < now_ms:
            return MultisigTransactionStatus.EXPIRED

        approvals = sum(1 for s in account["signers"] if s)
        if approvals == multisig.threshold:
            return MultisigTransactionStatus.APPROVED

        if multisig.owner_seq_number != int(account["owner_set_seqno"]):
            return MultisigTransactionStatus.VOIDED

        return MultisigTransactionStatus.PENDING

    except Exception as e:
        raise MultisigError(TRANSACTION_STATUS, e) from e

"""Display summaries of decoded transactions."""

from datetime import datetime, timezone
from typing import Optional

from ..log import get_logger
from ..models import (
    InstructionAccount,
    InstructionParameter,
    MultisigInstruction,
    MultisigTransaction,
    MultisigTransactionSummary,
)
from .codec import datetime_to_ms, normalize_expiration_ms, to_hex_pairs

logger = get_logger(__name__)


def format_expiration(expiration_date: Optional[datetime]) -> str:
    if not expiration_date:
        return ""
    ms = datetime_to_ms(expiration_date)
    normalized = normalize_expiration_ms(ms)
    if normalized != ms:
        expiration_date = datetime.fromtimestamp(normalized / 1000, tz=timezone.utc)
    return expiration_date.isoformat()


def parse_multisig_transaction_instruction(
    transaction: MultisigTransaction,
) -> Optional[MultisigInstruction]:
    """
    Build the instruction preview of a transaction.

    Accounts are listed by position without labels, and the instruction
    data is rendered as a single hex parameter.
    """
    try:
        accounts = [
            InstructionAccount(index=i, label="", address=str(acc.pubkey))
            for i, acc in enumerate(transaction.accounts)
        ]

        return MultisigInstruction(
            program_id=str(transaction.program_id),
            accounts=accounts,
            data=[InstructionParameter(index=0, name="", value=to_hex_pairs(transaction.data))],
        )
    except Exception as e:
        logger.error(
            "transaction_instruction_failed",
            transaction=str(getattr(transaction, "id", None)),
            error=str(e),
        )
        return None


def get_multisig_transaction_summary(
    transaction: MultisigTransaction,
) -> Optional[MultisigTransactionSummary]:
    """Flatten a decoded transaction into display strings. None on failure."""
    try:
        details = transaction.details

        return MultisigTransactionSummary(
            address=str(transaction.id),
            operation=str(transaction.operation),
            proposer=str(transaction.proposer) if transaction.proposer else "",
            title=details.title if details else "",
            description=details.description if details else "",
            created_on=transaction.created_on.isoformat(),
            executed_on=transaction.executed_on.isoformat() if transaction.executed_on else "",
            expiration_date=format_expiration(details.expiration_date) if details else "",
            approvals=sum(1 for s in transaction.signers if s is True),
            multisig=str(transaction.multisig),
            status=str(int(transaction.status)),
            did_signed=bool(transaction.did_signed),
            instruction=parse_multisig_transaction_instruction(transaction),
        )
    except Exception as e:
        logger.error(
            "transaction_summary_failed",
            transaction=str(getattr(transaction, "id", None)),
            error=str(e),
        )
        return None

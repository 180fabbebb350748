"""msigkit - decode multisig program accounts, derive transaction status and estimate fees."""

from .core import get_fees, get_transaction_status, SolanaRpcClient
from .accounts import (
    parse_multisig_v1_account,
    parse_multisig_v2_account,
    parse_multisig_transaction,
    parse_multisig_transaction_detail,
    get_multisig_transaction_summary,
)
from .errors import MultisigError
from .models import (
    MultisigAction,
    MultisigInfo,
    MultisigParticipant,
    MultisigTransaction,
    MultisigTransactionDetail,
    MultisigTransactionFees,
    MultisigTransactionStatus,
    MultisigTransactionSummary,
    MultisigInstruction,
    InstructionAccount,
    InstructionParameter,
    TransactionAccount,
)

__version__ = "0.1.0"
__all__ = [
    "get_fees",
    "get_transaction_status",
    "SolanaRpcClient",
    "parse_multisig_v1_account",
    "parse_multisig_v2_account",
    "parse_multisig_transaction",
    "parse_multisig_transaction_detail",
    "get_multisig_transaction_summary",
    "MultisigError",
    "MultisigAction",
    "MultisigInfo",
    "MultisigParticipant",
    "MultisigTransaction",
    "MultisigTransactionDetail",
    "MultisigTransactionFees",
    "MultisigTransactionStatus",
    "MultisigTransactionSummary",
    "MultisigInstruction",
    "InstructionAccount",
    "InstructionParameter",
    "TransactionAccount",
]

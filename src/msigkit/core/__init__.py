"""Fee estimation, status resolution and the RPC client."""

from .fees import get_fees, LAMPORTS_PER_SOL, MULTISIG_V2_ACCOUNT_SIZE, TRANSACTION_ACCOUNT_SIZE
from .status import get_transaction_status
from .rpc import SolanaRpcClient

__all__ = [
    "get_fees",
    "get_transaction_status",
    "SolanaRpcClient",
    "LAMPORTS_PER_SOL",
    "MULTISIG_V2_ACCOUNT_SIZE",
    "TRANSACTION_ACCOUNT_SIZE",
]

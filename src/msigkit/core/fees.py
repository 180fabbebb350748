"""Fee estimation for multisig actions."""

from typing import Protocol

from ..log import get_logger
from ..models import MultisigAction, MultisigTransactionFees

logger = get_logger(__name__)

LAMPORTS_PER_SOL = 1_000_000_000

MULTISIG_FEE = 0.02
NETWORK_FEE = 0.00001
CANCEL_NETWORK_FEE = 0.000005

# Anchor discriminator + 10 owner slots (address, name) + version, nonce,
# label, owner_set_seqno, threshold, pending_txs, created_on
MULTISIG_V2_ACCOUNT_SIZE = 8 + 10 * (32 + 32) + 1 + 1 + 32 + 4 + 8 + 8 + 8
TRANSACTION_ACCOUNT_SIZE = 1500


class RentExemptionProvider(Protocol):
    async def get_minimum_balance_for_rent_exemption(self, size: int) -> int:
        ...


async def get_fees(
    connection: RentExemptionProvider,
    action: MultisigAction,
    multisig_account_size: int = MULTISIG_V2_ACCOUNT_SIZE,
) -> MultisigTransactionFees:
    """
    Estimate the fees of a multisig action.

    Args:
        connection: Provider of the rent-exempt minimum (one call at most)
        action: Action to estimate
        multisig_account_size: Size of the multisig account to create

    Returns:
        Fees in SOL. Errors from the connection propagate unchanged.
    """
    fees = MultisigTransactionFees(multisig_fee=MULTISIG_FEE)
    rent_lamports = 0

    if action == MultisigAction.CREATE_MULTISIG:
        fees.network_fee = NETWORK_FEE
        rent_lamports = await connection.get_minimum_balance_for_rent_exemption(
            multisig_account_size
        )
    elif action == MultisigAction.CREATE_TRANSACTION:
        fees.network_fee = NETWORK_FEE
        rent_lamports = await connection.get_minimum_balance_for_rent_exemption(
            TRANSACTION_ACCOUNT_SIZE
        )
    elif action == MultisigAction.CANCEL_TRANSACTION:
        fees.network_fee = CANCEL_NETWORK_FEE

    fees.rent_exempt = rent_lamports / LAMPORTS_PER_SOL

    logger.debug(
        "fees_estimated",
        action=action.value,
        network_fee=fees.network_fee,
        rent_exempt=fees.rent_exempt,
        multisig_fee=fees.multisig_fee,
    )
    return fees

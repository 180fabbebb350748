"""Decoders for multisig, transaction and transaction detail accounts."""

from .multisig import (
    find_multisig_authority,
    parse_multisig_v1_account,
    parse_multisig_v2_account,
    parse_multisig_account,
)
from .transaction import parse_multisig_transaction, parse_multisig_transaction_detail
from .summary import (
    get_multisig_transaction_summary,
    parse_multisig_transaction_instruction,
    format_expiration,
)

__all__ = [
    "find_multisig_authority",
    "parse_multisig_v1_account",
    "parse_multisig_v2_account",
    "parse_multisig_account",
    "parse_multisig_transaction",
    "parse_multisig_transaction_detail",
    "get_multisig_transaction_summary",
    "parse_multisig_transaction_instruction",
    "format_expiration",
]

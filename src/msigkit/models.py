"""
Data models for multisig accounts and transactions.

These models are read-only projections of the state persisted by the
on-chain multisig program. They are rebuilt from raw account records on
every decode call.
"""

from dataclasses import dataclass, field, asdict
from datetime import datetime
from enum import Enum, IntEnum
from typing import List, Dict, Optional, Any

from solders.pubkey import Pubkey


class MultisigTransactionStatus(IntEnum):
    """Lifecycle status of a multisig transaction proposal."""
    PENDING = 0
    APPROVED = 1
    EXECUTED = 2
    VOIDED = 3
    EXPIRED = 4


class MultisigAction(Enum):
    """Actions a client can submit to the multisig program."""
    CREATE_MULTISIG = "create_multisig"
    EDIT_MULTISIG = "edit_multisig"
    CREATE_TRANSACTION = "create_transaction"
    APPROVE_TRANSACTION = "approve_transaction"
    EXECUTE_TRANSACTION = "execute_transaction"
    CANCEL_TRANSACTION = "cancel_transaction"


@dataclass
class MultisigParticipant:
    """A multisig owner."""
    address: str  # base58
    name: str = ""


@dataclass
class MultisigInfo:
    """Decoded multisig account (v1 or v2)."""
    id: Pubkey
    version: int
    label: str
    authority: Pubkey  # PDA signing for the multisig
    nonce: int
    owner_seq_number: int
    threshold: int
    pending_txs_amount: int
    created_on_utc: datetime
    owners: List[MultisigParticipant] = field(default_factory=list)

    @property
    def threshold_display(self) -> str:
        return f"{self.threshold} of {len(self.owners)}"


@dataclass
class TransactionAccount:
    """An account referenced by the proposed instruction."""
    pubkey: Pubkey
    is_signer: bool = False
    is_writable: bool = False


@dataclass
class MultisigTransactionDetail:
    """Free-form metadata attached to a transaction proposal."""
    title: str = ""
    description: str = ""
    expiration_date: Optional[datetime] = None


@dataclass
class MultisigTransaction:
    """Decoded multisig transaction proposal."""
    id: Pubkey
    multisig: Pubkey
    program_id: Pubkey  # target program of the proposed instruction
    signers: List[bool]
    owner_seq_number: int
    created_on: datetime
    status: MultisigTransactionStatus
    operation: int = 0
    executed_on: Optional[datetime] = None
    accounts: List[TransactionAccount] = field(default_factory=list)
    did_signed: bool = False
    proposer: Optional[Pubkey] = None
    pda_timestamp: Optional[int] = None
    pda_bump: Optional[int] = None
    data: bytes = b""
    details: MultisigTransactionDetail = field(default_factory=MultisigTransactionDetail)

    @property
    def approvals(self) -> int:
        return sum(1 for s in self.signers if s)


@dataclass
class MultisigTransactionFees:
    """Fee estimate for a multisig action, in SOL."""
    network_fee: float = 0.0
    rent_exempt: float = 0.0
    multisig_fee: float = 0.0

    @property
    def total(self) -> float:
        return self.network_fee + self.rent_exempt + self.multisig_fee


@dataclass
class InstructionAccount:
    index: int
    label: str
    address: str


@dataclass
class InstructionParameter:
    index: int
    name: str
    value: str


@dataclass
class MultisigInstruction:
    """Display form of the proposed instruction."""
    program_id: str
    accounts: List[InstructionAccount] = field(default_factory=list)
    data: List[InstructionParameter] = field(default_factory=list)


@dataclass
class MultisigTransactionSummary:
    """Flattened, display-ready view of a transaction."""
    address: str
    operation: str
    proposer: str
    title: str
    description: str
    created_on: str
    executed_on: str
    expiration_date: str
    approvals: int
    multisig: str
    status: str
    did_signed: bool
    instruction: Optional[MultisigInstruction] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

"""Raw account records and JSON snapshot loading."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from solders.pubkey import Pubkey

from ..accounts.codec import to_pubkey


@dataclass
class AccountRecord:
    """An account as persisted by the multisig program, already split into fields."""
    public_key: Pubkey
    account: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AccountRecord":
        return cls(public_key=to_pubkey(data["public_key"]), account=dict(data.get("account", {})))


@dataclass
class TransactionSnapshot:
    transaction: AccountRecord
    detail: Optional[Dict[str, Any]] = None


@dataclass
class MultisigSnapshot:
    """A multisig account together with its transactions and their details."""
    program_id: Pubkey
    multisig: AccountRecord
    version: int = 2
    transactions: List[TransactionSnapshot] = field(default_factory=list)


def parse_snapshot(data: Dict[str, Any], default_program_id: Optional[str] = None) -> MultisigSnapshot:
    """Build a snapshot from its JSON document."""
    program_id = data.get("program_id") or default_program_id
    if not program_id:
        raise ValueError("Snapshot has no program_id")
    ms = data["multisig"]
    version = int(ms.get("version", ms.get("account", {}).get("version", 2)))

    transactions = [
        TransactionSnapshot(
            transaction=AccountRecord.from_dict(entry["transaction"]),
            detail=entry.get("detail"),
        )
        for entry in data.get("transactions", [])
    ]

    return MultisigSnapshot(
        program_id=to_pubkey(program_id),
        multisig=AccountRecord.from_dict(ms),
        version=version,
        transactions=transactions,
    )


def load_snapshot(path: Union[str, Path], default_program_id: Optional[str] = None) -> MultisigSnapshot:
    """Load a snapshot JSON file from disk."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    with open(path, "r") as f:
        return parse_snapshot(json.load(f), default_program_id)

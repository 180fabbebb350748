"""
Pytest fixtures for msigkit tests. Builders for raw account records as the
multisig program persists them, and a fake rent-exemption connection.
"""

from __future__ import annotations

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from solders.pubkey import Pubkey

from msigkit.models import MultisigInfo, MultisigParticipant
from msigkit.state import AccountRecord

CREATED_ON = 1_700_000_000  # 2023-11-14T22:13:20Z


def _padded(text: str, size: int = 32) -> list[int]:
    raw = list(text.encode("utf-8"))
    return raw + [0] * (size - len(raw))


@pytest.fixture
def owners() -> list[Pubkey]:
    return [Pubkey.new_unique() for _ in range(3)]


@pytest.fixture
def program_id() -> Pubkey:
    return Pubkey.new_unique()


@pytest.fixture
def multisig_info(owners):
    """Decoded multisig: threshold 2 of owners A, B, C at owner set #5."""
    return MultisigInfo(
        id=Pubkey.new_unique(),
        version=2,
        label="Treasury",
        authority=Pubkey.new_unique(),
        nonce=254,
        owner_seq_number=5,
        threshold=2,
        pending_txs_amount=1,
        created_on_utc=datetime.fromtimestamp(CREATED_ON, tz=timezone.utc),
        owners=[MultisigParticipant(address=str(o), name=n) for o, n in zip(owners, "ABC")],
    )


@pytest.fixture
def multisig_v2_record(owners):
    """Builder for a v2 multisig account with 10 owner slots."""
    def _build(**overrides) -> AccountRecord:
        slots = [{"address": o, "name": _padded(f"owner-{i}")} for i, o in enumerate(owners)]
        slots += [{"address": Pubkey.default(), "name": [0] * 32}] * (10 - len(slots))
        account = {
            "owners": slots,
            "version": 2,
            "nonce": 255,
            "label": _padded("Treasury"),
            "owner_set_seqno": 5,
            "threshold": 2,
            "pending_txs": 1,
            "created_on": CREATED_ON,
        }
        account.update(overrides)
        return AccountRecord(public_key=Pubkey.new_unique(), account=account)
    return _build


@pytest.fixture
def multisig_v1_record(owners):
    """Builder for a v1 multisig account (parallel owners / owners_names arrays)."""
    def _build(**overrides) -> AccountRecord:
        account = {
            "owners": list(owners),
            "owners_names": [_padded(n) for n in ("alice", "bob", "")],
            "version": 1,
            "nonce": 253,
            "label": _padded("Ops"),
            "owner_set_seqno": 3,
            "threshold": 2,
            "pending_txs": 0,
            "created_on": CREATED_ON,
        }
        account.update(overrides)
        return AccountRecord(public_key=Pubkey.new_unique(), account=account)
    return _build


@pytest.fixture
def tx_record(multisig_info):
    """Builder for a raw transaction account of multisig_info."""
    def _build(**overrides) -> AccountRecord:
        account = {
            "multisig": multisig_info.id,
            "program_id": Pubkey.new_unique(),
            "accounts": [
                {"pubkey": Pubkey.new_unique(), "is_signer": False, "is_writable": True},
                {"pubkey": Pubkey.new_unique(), "is_signer": True, "is_writable": False},
            ],
            "data": [2, 0, 0, 0, 0x10, 0xff],
            "signers": [True, False, False],
            "owner_set_seqno": 5,
            "created_on": CREATED_ON,
            "executed_on": 0,
            "operation": 1,
            "proposer": Pubkey.new_unique(),
            "pda_timestamp": 0,
            "pda_bump": 251,
        }
        account.update(overrides)
        return AccountRecord(public_key=Pubkey.new_unique(), account=account)
    return _build


@pytest.fixture
def padded():
    return _padded


@pytest.fixture
def connection():
    """Connection whose rent-exempt minimum is 2 SOL regardless of size."""
    conn = AsyncMock()
    conn.get_minimum_balance_for_rent_exemption.return_value = 2_000_000_000
    return conn

"""
Tests for transaction summaries and instruction previews.

Both builders log failures and return None.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

from msigkit.accounts.summary import (
    format_expiration,
    get_multisig_transaction_summary,
    parse_multisig_transaction_instruction,
)
from msigkit.accounts.transaction import parse_multisig_transaction
from msigkit.models import MultisigTransactionDetail


def _decode(multisig_info, owners, tx_record, detail=None, **fields):
    return parse_multisig_transaction(multisig_info, owners[0], tx_record(**fields), detail)


def test_summary_fields(multisig_info, owners, tx_record, padded):
    detail = {"title": padded("Upgrade"), "description": padded("v2 program"), "expiration_date": 0}
    tx = _decode(multisig_info, owners, tx_record, detail, signers=[True, True, False])

    summary = get_multisig_transaction_summary(tx)

    assert summary is not None
    assert summary.address == str(tx.id)
    assert summary.multisig == str(multisig_info.id)
    assert summary.operation == "1"
    assert summary.proposer == str(tx.proposer)
    assert summary.title == "Upgrade"
    assert summary.description == "v2 program"
    assert summary.created_on == "2023-11-14T22:13:20+00:00"
    assert summary.executed_on == ""
    assert summary.expiration_date == ""
    assert summary.approvals == 2
    assert summary.status == "1"
    assert summary.did_signed is True


def test_summary_without_proposer(multisig_info, owners, tx_record):
    tx = _decode(multisig_info, owners, tx_record, proposer=None)
    assert get_multisig_transaction_summary(tx).proposer == ""


def test_summary_is_json_serializable(multisig_info, owners, tx_record):
    summary = get_multisig_transaction_summary(_decode(multisig_info, owners, tx_record))
    data = json.loads(json.dumps(summary.to_dict()))
    assert data["instruction"]["data"][0]["value"] == "02 00 00 00 10 ff"


def test_instruction_preview(multisig_info, owners, tx_record):
    tx = _decode(multisig_info, owners, tx_record)

    ix = parse_multisig_transaction_instruction(tx)

    assert ix.program_id == str(tx.program_id)
    assert [(a.index, a.label, a.address) for a in ix.accounts] == [
        (0, "", str(tx.accounts[0].pubkey)),
        (1, "", str(tx.accounts[1].pubkey)),
    ]
    assert len(ix.data) == 1
    assert ix.data[0].index == 0
    assert ix.data[0].name == ""
    assert ix.data[0].value == "02 00 00 00 10 ff"


def test_instruction_preview_empty_data(multisig_info, owners, tx_record):
    tx = _decode(multisig_info, owners, tx_record, data=[], accounts=[])
    ix = parse_multisig_transaction_instruction(tx)
    assert ix.accounts == []
    assert ix.data[0].value == ""


def test_instruction_failure_returns_none(multisig_info, owners, tx_record):
    tx = _decode(multisig_info, owners, tx_record)
    tx.accounts = [object()]
    assert parse_multisig_transaction_instruction(tx) is None


def test_summary_failure_returns_none(multisig_info, owners, tx_record):
    tx = _decode(multisig_info, owners, tx_record)
    tx.created_on = None
    assert get_multisig_transaction_summary(tx) is None


def test_summary_survives_broken_instruction(multisig_info, owners, tx_record):
    tx = _decode(multisig_info, owners, tx_record)
    tx.accounts = [object()]
    summary = get_multisig_transaction_summary(tx)
    assert summary is not None
    assert summary.instruction is None


def test_summary_without_details(multisig_info, owners, tx_record):
    tx = _decode(multisig_info, owners, tx_record)
    tx.details = None
    summary = get_multisig_transaction_summary(tx)
    assert summary.title == ""
    assert summary.expiration_date == ""


def test_expiration_formatting_keeps_regular_dates():
    dt = datetime(2030, 1, 1, tzinfo=timezone.utc)
    assert format_expiration(dt) == "2030-01-01T00:00:00+00:00"
    assert format_expiration(None) == ""


def test_expiration_formatting_corrects_double_scaling():
    # 14-digit ms value: one factor of 1000 too many
    scaled = datetime.fromtimestamp(20_000_000_000_000 / 1000, tz=timezone.utc)
    assert format_expiration(scaled) == datetime.fromtimestamp(20_000_000_000 / 1000, tz=timezone.utc).isoformat()


def test_summary_includes_expiration(multisig_info, owners, tx_record):
    tx = _decode(multisig_info, owners, tx_record)
    tx.details = MultisigTransactionDetail(expiration_date=datetime(2031, 5, 1, tzinfo=timezone.utc))
    assert get_multisig_transaction_summary(tx).expiration_date == "2031-05-01T00:00:00+00:00"

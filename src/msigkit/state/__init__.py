"""Raw account records and snapshots."""

from .snapshot import (
    AccountRecord,
    TransactionSnapshot,
    MultisigSnapshot,
    parse_snapshot,
    load_snapshot,
)

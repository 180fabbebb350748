"""
CLI entry point for msigkit.

Usage:
    msigkit fees create-multisig --network devnet
    msigkit multisig snapshot.json
    msigkit transactions snapshot.json --owner OWNER_ADDRESS -o summaries.json
"""

import argparse
import asyncio
import json
import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from msigkit.config import get_settings, load_env, rpc_url_for
from msigkit.models import MultisigAction

console = Console()

ACTION_CHOICES = [a.value.replace("_", "-") for a in MultisigAction]


def show_fees(args: argparse.Namespace) -> int:
    """Estimate the fees of a multisig action."""
    try:
        settings = get_settings()
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1
    rpc_url = args.rpc or (rpc_url_for(args.network) if args.network else settings.rpc_url)
    action = MultisigAction(args.action.replace("-", "_"))

    from msigkit.core import SolanaRpcClient, get_fees

    try:
        fees = asyncio.run(get_fees(SolanaRpcClient(rpc_url), action))
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    table = Table(title=f"Fees: {args.action}")
    table.add_column("Fee", style="cyan")
    table.add_column("SOL", justify="right")
    table.add_row("Network", f"{fees.network_fee:.9f}")
    table.add_row("Rent exempt", f"{fees.rent_exempt:.9f}")
    table.add_row("Multisig", f"{fees.multisig_fee:.9f}")
    table.add_row("[bold]Total[/bold]", f"[bold]{fees.total:.9f}[/bold]")

    console.print()
    console.print(table)
    console.print(f"[dim]RPC: {rpc_url}[/dim]")
    return 0


def _load_multisig(path: str):
    from msigkit.accounts import parse_multisig_account
    from msigkit.state import load_snapshot

    snapshot = load_snapshot(path, default_program_id=get_settings().program_id)
    multisig = asyncio.run(
        parse_multisig_account(snapshot.program_id, snapshot.multisig, snapshot.version)
    )
    return snapshot, multisig


def show_multisig(args: argparse.Namespace) -> int:
    """Decode the multisig account of a snapshot."""
    try:
        snapshot, multisig = _load_multisig(args.snapshot)
    except FileNotFoundError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1
    except Exception as e:
        console.print(f"[red]Error reading snapshot: {e}[/red]")
        return 1

    if multisig is None:
        console.print(f"[red]✗ Could not decode multisig {snapshot.multisig.public_key}[/red]")
        return 1

    console.print()
    console.print(Panel(
        f"[bold cyan]{multisig.label or '(no label)'}[/bold cyan]\n\n"
        f"[dim]Address: {multisig.id}[/dim]\n"
        f"[dim]Authority: {multisig.authority}[/dim]\n"
        f"[dim]Version: {multisig.version} | Threshold: {multisig.threshold_display}[/dim]\n"
        f"[dim]Owner set: #{multisig.owner_seq_number} | Pending: {multisig.pending_txs_amount}[/dim]\n"
        f"[dim]Created: {multisig.created_on_utc.isoformat()}[/dim]",
        title="[bold]Multisig[/bold]",
    ))

    table = Table(title="Owners")
    table.add_column("#", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Address", style="dim")
    for i, owner in enumerate(multisig.owners):
        table.add_row(str(i), owner.name or "-", owner.address)
    console.print(table)
    return 0


def show_transactions(args: argparse.Namespace) -> int:
    """Decode the transactions of a snapshot and print their summaries."""
    from msigkit.accounts import get_multisig_transaction_summary, parse_multisig_transaction
    from msigkit.models import MultisigTransactionStatus

    try:
        snapshot, multisig = _load_multisig(args.snapshot)
    except Exception as e:
        console.print(f"[red]Error reading snapshot: {e}[/red]")
        return 1

    if multisig is None:
        console.print(f"[red]✗ Could not decode multisig {snapshot.multisig.public_key}[/red]")
        return 1

    summaries = []
    for entry in snapshot.transactions:
        try:
            tx = parse_multisig_transaction(multisig, args.owner, entry.transaction, entry.detail)
        except Exception as e:
            console.print(f"[red]Error: {e}[/red]")
            return 1
        summary = get_multisig_transaction_summary(tx)
        if summary:
            summaries.append(summary)

    if not summaries:
        console.print("[yellow]No transactions found[/yellow]")
        return 0

    table = Table(title=f"Transactions ({multisig.threshold_display})")
    table.add_column("Title", style="cyan")
    table.add_column("Status")
    table.add_column("Approvals", justify="right")
    table.add_column("Signed", justify="center")
    table.add_column("Created", style="dim")
    table.add_column("Address", style="dim")

    for s in summaries:
        table.add_row(
            s.title or "-",
            MultisigTransactionStatus(int(s.status)).name.lower(),
            f"{s.approvals}/{multisig.threshold}",
            "✓" if s.did_signed else "",
            s.created_on,
            s.address[:8] + "...",
        )

    console.print()
    console.print(table)

    if args.output:
        with open(args.output, "w") as f:
            json.dump([s.to_dict() for s in summaries], f, indent=2)
        console.print(f"\n[dim]Results exported to: {args.output}[/dim]")

    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="msigkit",
        description="Inspect multisig accounts and estimate multisig fees",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # fees command
    fees_parser = subparsers.add_parser("fees", help="Estimate the fees of an action")
    fees_parser.add_argument("action", type=str, choices=ACTION_CHOICES, help="Multisig action")
    fees_parser.add_argument("--rpc", type=str, help="RPC endpoint (overrides --network)")
    fees_parser.add_argument(
        "--network", "-n",
        type=str,
        choices=["devnet", "mainnet"],
        help="Network to use (default: from environment, devnet)"
    )

    # multisig command
    multisig_parser = subparsers.add_parser("multisig", help="Decode a multisig snapshot")
    multisig_parser.add_argument("snapshot", type=str, help="Path to snapshot JSON file")

    # transactions command
    tx_parser = subparsers.add_parser("transactions", help="Summarize snapshot transactions")
    tx_parser.add_argument("snapshot", type=str, help="Path to snapshot JSON file")
    tx_parser.add_argument("--owner", required=True, type=str, help="Querying owner address")
    tx_parser.add_argument(
        "--output", "-o",
        type=str,
        help="Output file for JSON summaries"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    load_env()

    if args.command == "fees":
        return show_fees(args)
    elif args.command == "multisig":
        return show_multisig(args)
    elif args.command == "transactions":
        return show_transactions(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())

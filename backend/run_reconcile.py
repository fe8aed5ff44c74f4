#!/usr/bin/env python3
"""
Run one reconciliation pass from the command line.

Lists every Supabase Auth user and every profiles row, deletes orphaned
profiles and creates profiles for users that lack one.

Usage:
    python run_reconcile.py               # Apply corrections
    python run_reconcile.py --dry-run     # Only report what would change
    python run_reconcile.py --json        # Print the summary as JSON

Configuration:
    SUPABASE_URL, SUPABASE_PROJECT_ID, SUPABASE_SERVICE_ROLE_KEY,
    SUPABASE_DB_SCHEMA and SUPABASE_PROFILES_TABLE in the environment
    or in a .env file.

Exit codes:
    0  pass completed (individual items may still have failed)
    1  configuration, connection or unexpected failure
    2  safety guard: the identity listing came back empty
"""

import argparse
import asyncio
import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from shared.config import get_settings
from shared.exceptions import ConfigurationError
from modules.accounts import (
    IdentityStoreUnavailableError,
    ReconciliationOutcome,
    SuspiciousEmptyResultError,
    create_account_service,
)

console = Console()

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_GUARD = 2


def print_summary(outcome: ReconciliationOutcome) -> None:
    """Print a reconciliation summary table."""
    title = "Reconciliation (dry run)" if outcome.dry_run else "Reconciliation"
    table = Table(title=title)
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right")

    table.add_row("Auth users", str(outcome.auth_users))
    table.add_row("Profile documents", str(outcome.db_documents))
    table.add_row("Orphans found", str(outcome.orphans_found))
    table.add_row("Missing found", str(outcome.missing_found))
    table.add_row("Orphans deleted", str(outcome.orphans_deleted))
    table.add_row("Missing created", str(outcome.missing_created))
    console.print(table)

    for failure in outcome.failures:
        console.print(
            f"[red]{failure.operation.value}[/red] {failure.id}: {failure.error}"
        )


def run(dry_run: bool, as_json: bool) -> int:
    """Run one pass and return the process exit code."""
    settings = get_settings()

    try:
        service = create_account_service(settings)
        outcome = asyncio.run(service.reconcile(dry_run=dry_run))
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        return EXIT_FAILED
    except SuspiciousEmptyResultError as e:
        console.print(f"[red]Safety guard:[/red] {e.message}")
        return EXIT_GUARD
    except IdentityStoreUnavailableError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        return EXIT_FAILED
    except Exception as e:
        console.print(f"[red]Sync failed:[/red] {e}")
        console.print_exception()
        return EXIT_FAILED

    if as_json:
        print(json.dumps(outcome.to_response(), indent=2))
    else:
        print_summary(outcome)
    return EXIT_OK


def main():
    parser = argparse.ArgumentParser(description="Reconcile profiles with Supabase Auth")
    parser.add_argument("--dry-run", action="store_true", help="Report changes without applying them")
    parser.add_argument("--json", action="store_true", help="Print the summary as JSON")
    args = parser.parse_args()

    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run(dry_run=args.dry_run, as_json=args.json))


if __name__ == "__main__":
    main()

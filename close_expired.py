#!/usr/bin/env python3
"""
Close expired nominations and voting events, and list upcoming deadlines.

Usage:
    python close_expired.py                 # Close expired nominations and voting events
    python close_expired.py nominations     # Close expired nominations only
    python close_expired.py voting          # Close expired voting events only
    python close_expired.py --deadlines     # List deadlines within the reminder horizon
    python close_expired.py --deadlines 48  # ... within the next 48 hours
"""

import sys
from datetime import timedelta
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container
from settings import REMINDER_HORIZON_HOURS
from settings.logging import setup_logging

logger = setup_logging()


def close_nominations() -> list[int]:
    """Close every active nomination past its end date."""
    logger.info("Checking for expired nominations...")
    return container.nominations.close_expired()


def close_voting_events() -> list[int]:
    """Close every active voting event past its end date and record winners."""
    logger.info("Checking for expired voting events...")
    return container.voting_events.close_expired()


def print_deadlines(hours: int) -> None:
    items = container.dashboard.upcoming_deadlines(horizon=timedelta(hours=hours))

    print("\n" + "=" * 60)
    print(f"DEADLINES IN THE NEXT {hours} HOURS")
    print("=" * 60)
    if not items:
        print("\nNothing due.")
    for item in items:
        kind = "Nomination" if item["kind"] == "nomination" else "Voting event"
        print(f"\n{kind} {item['id']} (club {item['club_id']}): {item['title']}")
        print(f"  {item['edge']} at {item['at']:%Y-%m-%d %H:%M}")
    print("=" * 60 + "\n")


def main():
    args = sys.argv[1:]
    container.init()

    if "--deadlines" in args:
        rest = [a for a in args if a.isdigit()]
        print_deadlines(int(rest[0]) if rest else REMINDER_HORIZON_HOURS)
        return

    unknown = [a for a in args if a not in ("nominations", "voting")]
    if unknown:
        print(__doc__)
        sys.exit(1)

    closed_nominations, closed_events = [], []
    if not args or "nominations" in args:
        closed_nominations = close_nominations()
    if not args or "voting" in args:
        closed_events = close_voting_events()

    logger.info(
        "Done: {} nominations and {} voting events closed",
        len(closed_nominations),
        len(closed_events),
    )


if __name__ == "__main__":
    main()

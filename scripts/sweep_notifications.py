"""Delete notification records older than the retention window.

Intended to be invoked once every 24 hours by an external scheduler (cron,
Cloud Scheduler, a Kubernetes CronJob...).
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.notifications import sweep_notifications
from app.config import get_settings
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the retention sweep."""

    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Purge old push notification records from the SmartCart database.",
    )
    parser.add_argument(
        "--retention-days",
        type=int,
        default=settings.notification_retention_days,
        help=(
            "Age in days beyond which records are deleted "
            f"(default: {settings.notification_retention_days})"
        ),
    )
    parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        default=None,
        help="Reference time in ISO 8601 format (default: current time)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args()


def main() -> None:
    """Run one retention sweep using the command line arguments."""

    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    initialize_database()

    session = SessionLocal()
    try:
        deleted = sweep_notifications(
            session, get_settings(), now=args.now, retention_days=args.retention_days
        )
    except ValueError as exc:
        raise SystemExit(f"Invalid sweep parameters: {exc}") from exc
    except SQLAlchemyError as exc:
        raise SystemExit(f"Error deleting notification records: {exc}") from exc
    else:
        print(f"Deleted {deleted} notification records older than {args.retention_days} days")
    finally:
        session.close()


if __name__ == "__main__":
    main()

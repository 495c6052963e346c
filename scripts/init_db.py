#!/usr/bin/env python3
"""Create the database tables with Logfire error tracking.

Tables that already exist are left alone. Pass ``--drop`` to drop every
table first.
"""

import argparse
import asyncio
import sys

import logfire

from juicebox.config import Settings
from juicebox.persistence.database import create_engine, create_schema, drop_schema
from juicebox.util.observability import configure_logfire


async def init_db(settings: Settings, drop: bool) -> None:
    """Create (and optionally first drop) the schema."""
    engine = create_engine(settings)
    try:
        if drop:
            logfire.warn("Dropping all tables")
            await drop_schema(engine)
        await create_schema(engine)
    finally:
        await engine.dispose()


def main() -> int:
    """Create the schema and log any errors to Logfire."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--drop", action="store_true", help="drop all tables first")
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info("Creating database schema", drop=args.drop)
        asyncio.run(init_db(settings, args.drop))
        logfire.info("Database schema ready")
        return 0

    except Exception as e:
        logfire.error(
            "Database schema creation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())

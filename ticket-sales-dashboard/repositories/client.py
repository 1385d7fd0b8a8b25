"""
Supabase client initialization.

This module contains *only* the database connection setup. Other repository
modules call `get_supabase()` to obtain the shared client.

Environment variables:
- SUPABASE_URL: Your Supabase project URL
- SUPABASE_KEY: Your Supabase API key
- SALES_TABLE: Table holding sale records (default: "sales")

A missing URL or key is not an error: `get_supabase()` returns None and the
ledger runs empty.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from supabase import Client, create_client  # type: ignore[import-not-found]

logger = logging.getLogger(__name__)

# Look for .env in the ticket-sales-dashboard directory
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


def sales_table_name() -> str:
    return os.getenv("SALES_TABLE") or "sales"


def is_supabase_configured() -> bool:
    """True when both SUPABASE_URL and SUPABASE_KEY are set."""

    return bool(os.getenv("SUPABASE_URL")) and bool(os.getenv("SUPABASE_KEY"))


@lru_cache(maxsize=1)
def get_supabase() -> Optional[Client]:
    """
    Return the shared Supabase client, or None when credentials are missing.

    The result is cached; call `get_supabase.cache_clear()` after changing
    the environment.
    """

    if not is_supabase_configured():
        logger.warning(
            "Supabase is not configured; sales ledger will start empty",
            extra={"missing": [name for name in ("SUPABASE_URL", "SUPABASE_KEY") if not os.getenv(name)]},
        )
        return None

    return create_client(os.environ["SUPABASE_URL"], os.environ["SUPABASE_KEY"])


__all__ = ["get_supabase", "is_supabase_configured", "sales_table_name"]

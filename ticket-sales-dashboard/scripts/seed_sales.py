#!/usr/bin/env python3
"""
Seed the Supabase sales table with demo sales.

Skips records whose id already exists, so it is safe to run repeatedly.

Usage:
    python seed_sales.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to path so we can import from repositories
sys.path.insert(0, str(Path(__file__).parent.parent))

from repositories.sale_repository import PersistenceError, SupabaseSaleRepository
from repositories.seed_data import seed_sales


def seed() -> int:
    """Insert every seed sale that is not yet stored."""

    repository = SupabaseSaleRepository.from_environment()
    if not repository.is_configured:
        print("[ERROR] SUPABASE_URL and SUPABASE_KEY must be set")
        return 1

    existing = {sale.sale_id for sale in repository.list_sales()}
    inserted = 0

    # Oldest first so created_at ordering matches the seed order.
    for sale in reversed(seed_sales()):
        if sale.sale_id in existing:
            print(f"Already present: {sale.sale_id}")
            continue
        try:
            repository.insert_sale(sale)
        except PersistenceError as e:
            print(f"[ERROR] {sale.sale_id}: {e}")
            return 1
        inserted += 1

    print(f"[SUCCESS] Inserted {inserted} seed sales")
    return 0


if __name__ == "__main__":
    sys.exit(seed())

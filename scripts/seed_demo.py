#!/usr/bin/env python3
"""
Seed demo categories and card transactions.

Safe to run more than once: categories that already exist are reused and
transactions are only added to an empty ledger.
"""

import sys
from datetime import timedelta
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from card_ledger.config import settings
from card_ledger.database import build_engine, build_session_factory, create_tables
from card_ledger.models.transaction import utcnow
from card_ledger.services import Services

DEMO_CATEGORIES = [
    "Food",
    "Transportation",
    "Travel Expenses",
    "Office Supplies",
    "Entertainment",
    "Utilities",
]

# (card, amount, category, days ago, status)
DEMO_TRANSACTIONS = [
    ("1234", "45.50", "Food", 7, "approved"),
    ("5678", "25.00", "Transportation", 5, "approved"),
    ("9012", "350.00", "Travel Expenses", 3, "pending"),
    ("3456", "89.99", "Office Supplies", 2, "approved"),
    ("7890", "120.00", "Entertainment", 1, "rejected"),
    ("2468", "75.25", "Utilities", 0, "pending"),
    ("1234", "32.75", "Food", 0, "pending"),
]


def create_demo_data():
    """Create sample categories and transactions for demo"""
    engine = build_engine(settings.DATABASE_URL)
    create_tables(engine)
    services = Services(build_session_factory(engine))

    existing = {category.name: category for category in services.categories.get_all()}
    for name in DEMO_CATEGORIES:
        if name not in existing:
            existing[name] = services.categories.create(name)
    print(f"✓ {len(DEMO_CATEGORIES)} categories ready")

    if services.transactions.get_all():
        print("Transactions already present, skipping")
        return

    now = utcnow()
    for card, amount, category_name, days_ago, status in DEMO_TRANSACTIONS:
        services.transactions.create(
            card_last_four=card,
            amount=Decimal(amount),
            category_id=existing[category_name].id,
            transaction_date=now - timedelta(days=days_ago),
            status=status,
        )
    print(f"✓ Created {len(DEMO_TRANSACTIONS)} transactions")


if __name__ == "__main__":
    create_demo_data()

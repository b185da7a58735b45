"""
Migration helper for existing databases.
Run this ONCE if you have a database that was created by the app's
create_tables() before Alembic was set up for it.
"""
import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from card_ledger.config import settings


def main():
    print("=" * 70)
    print("Corporate Card Ledger - Database Migration Helper")
    print("=" * 70)
    print()
    print("This marks your existing database as up-to-date with the latest")
    print("Alembic revision. Only use it for databases created before Alembic.")
    print()

    response = input("Continue? (yes/no): ").strip().lower()
    if response != 'yes':
        print("Cancelled.")
        return

    db_path = settings.database_path
    if db_path is not None and not db_path.exists():
        print(f"\n❌ Database not found at {db_path}")
        print("   Nothing to stamp. Run `alembic upgrade head` for a fresh database.")
        return

    print("\nStamping database as up-to-date...")
    try:
        subprocess.run(
            [sys.executable, "-m", "alembic", "stamp", "head"],
            check=True,
            cwd=project_root
        )
    except subprocess.CalledProcessError as e:
        print(f"\n❌ Error during migration: {e}")
        sys.exit(1)

    print("\n✓ Database stamped at head.")


if __name__ == "__main__":
    main()

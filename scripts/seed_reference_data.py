#!/usr/bin/env python3
# scripts/seed_reference_data.py
"""
Database setup script
- Verifies database connection
- Creates all tables via Alembic migration
- Seeds default channel types and categories
"""
import os
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from linkbuilder.core.config import DATABASE_URL
from linkbuilder.core.exceptions import DuplicateName
from linkbuilder.db.session import test_db_connection, get_db_session
from linkbuilder.schemas.reference import ChannelTypeCreate, CategoryCreate
from linkbuilder.services import get_channel_type_service, get_category_service

CHANNEL_TYPES = [
    ("Display", "DSP", "#219DB8"),
    ("Email", "EML", "#F2994A"),
    ("Paid Search", "SEM", "#27AE60"),
    ("Social", "SOC", "#9B51E0"),
    ("Video", "VID", "#EB5757"),
]

CATEGORIES = ["Brand", "Events", "Lead Generation", "Product Launch", "Seasonal"]


def seed():
    print("=" * 70)
    print("🚀 LINK BUILDER DATABASE SETUP")
    print("=" * 70)

    print("\n1️⃣  Testing database connection...")
    print(f"   Database: {DATABASE_URL.split('@')[1] if '@' in DATABASE_URL else DATABASE_URL}")
    if not test_db_connection():
        print("   ❌ Database connection failed! Check the .env configuration")
        return 1
    print("   ✅ Database connected successfully")

    if "--skip-migrations" not in sys.argv:
        print("\n2️⃣  Running database migrations...")
        if os.system("alembic upgrade head") != 0:
            print("   ❌ Migration failed! Try manually: alembic upgrade head")
            return 1
        print("   ✅ All migrations applied")

    print("\n3️⃣  Seeding channel types and categories...")
    channel_types = get_channel_type_service()
    categories = get_category_service()
    with get_db_session() as db:
        for name, prefix, color in CHANNEL_TYPES:
            try:
                channel_types.create(db, ChannelTypeCreate(name=name, prefix=prefix, color=color))
                print(f"   ✓ channel type {name} ({prefix})")
            except DuplicateName:
                print(f"   ⚠️  channel type {name} exists")
        for name in CATEGORIES:
            try:
                categories.create(db, CategoryCreate(name=name))
                print(f"   ✓ category {name}")
            except DuplicateName:
                print(f"   ⚠️  category {name} exists")

    print("\n" + "=" * 70)
    print("✅ DATABASE SETUP COMPLETE!")
    print("=" * 70)
    print("\n🚀 Start Application:")
    print("   python -m uvicorn linkbuilder.main:app --reload --host 0.0.0.0 --port 8100")
    print("   Visit: http://localhost:8100/docs")
    return 0


if __name__ == "__main__":
    sys.exit(seed())

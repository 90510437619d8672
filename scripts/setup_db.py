"""
Database setup script.

Creates the products database and table, and seeds a few products
when the table is empty. Run this before starting the application.

Usage:
    python -m scripts.setup_db
"""

import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import asyncpg
from core.config import settings


CREATE_PRODUCTS_TABLE = """
    CREATE TABLE IF NOT EXISTS products (
        id SERIAL PRIMARY KEY,
        name VARCHAR(255) NOT NULL,
        description TEXT NOT NULL DEFAULT '',
        price NUMERIC(10, 2) NOT NULL,
        quantity INTEGER NOT NULL DEFAULT 0
    )
"""

SAMPLE_PRODUCTS = [
    ("Mechanical Keyboard", "Tenkeyless, brown switches", Decimal("89.90"), 12),
    ("USB-C Hub", "7 ports, 100W passthrough", Decimal("39.50"), 30),
    ("Monitor Arm", "Single arm, gas spring", Decimal("54.00"), 5),
]


async def setup_database():
    """Create database, table and sample rows."""

    missing = settings.missing_database_settings
    if missing:
        print(f"Missing settings: {', '.join(missing)}")
        sys.exit(1)

    db_name = settings.pg_db_store
    connect_kwargs = {
        "host": settings.pg_host,
        "port": settings.pg_port,
        "user": settings.pg_user,
        "password": settings.pg_pass,
    }

    print("Connecting to PostgreSQL...")
    print(f"Host: {settings.pg_host}:{settings.pg_port}, database: {db_name}")

    try:
        # Connect to default database
        conn = await asyncpg.connect(database="postgres", **connect_kwargs)

        exists = await conn.fetchval(
            "SELECT 1 FROM pg_database WHERE datname = $1",
            db_name
        )

        if not exists:
            print(f"Creating database: {db_name}")
            await conn.execute(f'CREATE DATABASE "{db_name}"')
            print(f"Database created: {db_name}")
        else:
            print(f"Database already exists: {db_name}")

        await conn.close()

        app_conn = await asyncpg.connect(database=db_name, **connect_kwargs)

        await app_conn.execute(CREATE_PRODUCTS_TABLE)
        print("Products table ready")

        count = await app_conn.fetchval("SELECT COUNT(*) FROM products")
        if count == 0:
            await app_conn.executemany(
                "INSERT INTO products (name, description, price, quantity) "
                "VALUES ($1, $2, $3, $4)",
                SAMPLE_PRODUCTS,
            )
            print(f"Inserted {len(SAMPLE_PRODUCTS)} sample products")
        else:
            print(f"Products table already has {count} rows")

        await app_conn.close()

        print("Database setup complete!")

    except Exception as e:
        print(f"Error setting up database: {e}")
        raise


if __name__ == "__main__":
    asyncio.run(setup_database())

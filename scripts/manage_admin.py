#!/usr/bin/env python3
"""Create or reset an admin account.

Usage:
  python3 scripts/manage_admin.py --username admin --password s3cret

Creates the database tables if they are missing. Point DATABASE_URL (or the
MYSQL_* variables) at the target database first.
"""
import sys
from pathlib import Path
import argparse

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.database.connection import SessionLocal, Base, engine
from app import crud


def main():
    parser = argparse.ArgumentParser(description='Create or reset an admin account')
    parser.add_argument("--username", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument("--name", default="Administrator")
    args = parser.parse_args()

    Base.metadata.create_all(bind=engine)

    with SessionLocal() as db:
        admin = crud.get_admin_by_username(db, args.username)
        if admin:
            print(f"Resetting password for existing admin: {args.username}")
            crud.set_admin_password(db, admin, args.password, name=args.name)
        else:
            print(f"Creating admin: {args.username}")
            crud.create_admin(db, args.username, args.password, name=args.name)
        print("Done")


if __name__ == '__main__':
    main()

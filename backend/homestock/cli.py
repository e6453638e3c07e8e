"""Command line tools.

Usage:
  homestock create-admin --username admin --email admin@example.com --password '...'
  homestock init-db
  homestock serve [--host 0.0.0.0] [--port 5000] [--reload]
"""

import argparse
import sys
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from homestock.core.config import settings


def _init_db() -> None:
    from homestock.db.session import engine
    from homestock.models import Base

    Base.metadata.create_all(bind=engine)


def create_admin(username: str, email: str, password: str) -> int:
    from homestock.db.session import SessionLocal
    from homestock.models.user import UserRole
    from homestock.schemas.user import UserCreate
    from homestock.services import auth_service

    try:
        data = UserCreate(username=username, email=email, password=password, role=UserRole.ADMIN)
    except ValidationError as e:
        print(f"Invalid input:\n{e}", file=sys.stderr)
        return 1

    _init_db()
    db = SessionLocal()
    try:
        if auth_service.get_user_by_email(db, data.email):
            print(f"Email already registered: {data.email}", file=sys.stderr)
            return 1
        user = auth_service.create_user(db, data)
        print(f"Created admin {user.username} <{user.email}> ({user.id})")
    finally:
        db.close()
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="homestock")
    sub = ap.add_subparsers(dest="command", required=True)

    admin = sub.add_parser("create-admin", help="Create an admin account")
    admin.add_argument("--username", required=True)
    admin.add_argument("--email", required=True)
    admin.add_argument("--password", required=True)

    sub.add_parser("init-db", help="Create database tables")

    serve = sub.add_parser("serve", help="Run the API server")
    serve.add_argument("--host", default=settings.HOST)
    serve.add_argument("--port", type=int, default=settings.PORT)
    serve.add_argument("--reload", action="store_true")

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "create-admin":
        return create_admin(args.username, args.email, args.password)

    if args.command == "init-db":
        _init_db()
        print("Database initialized")
        return 0

    uvicorn.run("homestock.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


if __name__ == "__main__":
    sys.exit(main())

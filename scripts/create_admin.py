#!/usr/bin/env python3
"""
Create an admin account. Registration through the API always yields
employees, so this is the way to get the first admin.

Usage: ADMIN_EMAIL=... ADMIN_PASSWORD=... python scripts/create_admin.py
"""

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import Session
from app.core.database import engine, Base
from app.core.exceptions import ConflictError
from app.core.security import get_password_hash
from app.models.user import UserRole
from app.repositories.sql import SqlUserRepository
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_admin(name: str, email: str, password: str):
    """Create the admin user unless the email is already registered."""
    Base.metadata.create_all(bind=engine)

    with Session(engine) as db:
        users = SqlUserRepository(db)
        try:
            user = users.create(
                name=name,
                email=email,
                hashed_password=get_password_hash(password),
                role=UserRole.ADMIN.value,
            )
        except ConflictError:
            logger.info(f"✅ User already exists: {email}")
            return None

        logger.info(f"✅ Admin created: {user.email} (id={user.id})")
        return user


if __name__ == "__main__":
    email = os.getenv("ADMIN_EMAIL")
    password = os.getenv("ADMIN_PASSWORD")
    if not email or not password:
        logger.error("❌ ADMIN_EMAIL and ADMIN_PASSWORD must be set")
        sys.exit(1)
    create_admin(os.getenv("ADMIN_NAME", "Administrator"), email, password)

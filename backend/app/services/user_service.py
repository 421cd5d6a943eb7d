"""User Service: profile read/update for the signed-in account."""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.models.user import User
from app.schemas.user import ProfileOut, ProfileUpdate
from app.services.auth_service import hash_password

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


def get_profile(user: User) -> ProfileOut:
    return ProfileOut(
        first_name=user.first_name or "",
        last_name=user.last_name or "",
        email=user.email,
        phone=user.phone or "",
        role=user.role,
    )


def update_profile(db: Session, user: User, data: ProfileUpdate) -> ProfileOut:
    first_name = data.first_name.strip()
    last_name = data.last_name.strip()
    email = data.email.strip().lower()
    if not first_name or not last_name or not email:
        raise HTTPException(status_code=400, detail="First name, last name and email are required")
    if "@" not in email:
        raise HTTPException(status_code=400, detail="Invalid email address")
    if data.password and len(data.password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
        )

    existing = db.query(User).filter(User.email == email, User.user_id != user.user_id).first()
    if existing:
        raise HTTPException(status_code=409, detail="Email is already in use")

    user.first_name = first_name
    user.last_name = last_name
    user.email = email
    if "phone" in data.model_fields_set:
        user.phone = (data.phone or "").strip() or None
    if data.password:
        user.password_hash = hash_password(data.password)
        logger.info("[profile] password changed for user %s", user.user_id)

    db.commit()
    db.refresh(user)
    return get_profile(user)

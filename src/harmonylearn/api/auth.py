"""
Authentication API Endpoints

Registration and credential check. No session or token is issued; clients
receive the public user record.
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from harmonylearn import storage
from harmonylearn.core.database import get_db
from harmonylearn.core.errors import ConflictError
from harmonylearn.core.schemas import AuthResponse, UserCreate, UserSchema
from harmonylearn.core.security import verify_password
from harmonylearn.core.validation import normalize_email

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, db: AsyncSession = Depends(get_db)) -> AuthResponse:
    """Create an account. The password is stored as a bcrypt hash."""
    if await storage.get_user_by_email(db, user_data.email):
        raise ConflictError("User already exists with this email")

    user = await storage.create_user(db, user_data)
    logger.info(f"Registered user {user.id}")

    return AuthResponse(
        message="User registered successfully", user=UserSchema.model_validate(user)
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    email: str | None = Body(None),
    password: str | None = Body(None),
    db: AsyncSession = Depends(get_db),
) -> AuthResponse:
    """Check credentials and return the user."""
    if not email or not password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email and password are required",
        )

    user = await storage.get_user_by_email(db, normalize_email(email))
    if not user or not verify_password(password, user.password):
        logger.info("Failed login attempt")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    return AuthResponse(message="Login successful", user=UserSchema.model_validate(user))

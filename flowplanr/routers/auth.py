# flowplanr/routers/auth.py
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from flowplanr.models.user import User
from flowplanr.schemas.user import UserCreate, UserLogin, UserResponse, Token
from flowplanr.database import get_db
from flowplanr.utils.password import hash_password, verify_password
from flowplanr.core.security import create_access_token, create_refresh_token
from flowplanr.core.auth import get_current_user
from flowplanr.repositories.users import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _issue_tokens(user: User) -> Token:
    return Token(
        access_token=create_access_token({"sub": user.id}),
        refresh_token=create_refresh_token({"sub": user.id}),
        token_type="bearer",
        user=UserResponse.model_validate(user)
    )


@router.post("/register", response_model=Token)
async def register(user_in: UserCreate, db: AsyncSession = Depends(get_db)):
    users = UserRepository(db)
    if await users.find_by_email(user_in.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    user = User(
        email=user_in.email,
        name=(user_in.name or "").strip() or None,
        password=hash_password(user_in.password)
    )
    user = await users.save(user)
    logger.info("Registered user %s", user.id)

    # Registering also logs the user in
    return _issue_tokens(user)


@router.post("/login", response_model=Token)
async def login(user_in: UserLogin, db: AsyncSession = Depends(get_db)):
    user = await UserRepository(db).find_by_email(user_in.email)

    # Verify credentials
    if not user or not verify_password(user_in.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return _issue_tokens(user)


@router.post("/logout")
async def logout(current_user: User = Depends(get_current_user)):
    # Tokens are stateless; the client drops them
    return {"message": "Logged out"}


@router.get("/me", response_model=UserResponse)
async def read_users_me(current_user: User = Depends(get_current_user)):
    return current_user

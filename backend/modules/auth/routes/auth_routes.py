"""
Account routes: registration and login.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db

from ..schemas import RegisteredUser, UserLogin, UserProfile, UserRegister
from ..services import AuthService

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post("/register", response_model=RegisteredUser, status_code=status.HTTP_201_CREATED)
async def register(data: UserRegister, db: Session = Depends(get_db)):
    """Create a customer account."""
    user = AuthService(db).register(data)
    return RegisteredUser(user_id=user.id, email=user.email, role=user.role)


@router.post("/login", response_model=UserProfile)
async def login(data: UserLogin, db: Session = Depends(get_db)):
    """Check credentials and return the user's profile."""
    user = AuthService(db).authenticate(data)
    return UserProfile(
        user_id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        role=user.role,
    )

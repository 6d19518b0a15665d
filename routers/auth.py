from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.db import get_db
from dependencies.security import CurrentUser
from schemas.common import SuccessEnvelope
from schemas.users import AuthOut, LoginRequest, RegisterRequest, UserOut
from services import user_service

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_payload(user) -> AuthOut:
    return AuthOut(user=UserOut.model_validate(user), token=user.api_token)


# ✅ [REGISTER]
@router.post("/register", status_code=201, response_model=SuccessEnvelope[AuthOut])
def register(request: RegisterRequest, db: Session = Depends(get_db)):
    user = user_service.register(db, request)
    return SuccessEnvelope(data=_auth_payload(user), message="User registered successfully")


# ✅ [LOGIN]
@router.post("/login", response_model=SuccessEnvelope[AuthOut])
def login(request: LoginRequest, db: Session = Depends(get_db)):
    user = user_service.login(db, request)
    return SuccessEnvelope(data=_auth_payload(user), message="Login successful")


# ✅ [ME]
@router.get("/me", response_model=SuccessEnvelope[UserOut])
def me(user: CurrentUser):
    return SuccessEnvelope(data=UserOut.model_validate(user))

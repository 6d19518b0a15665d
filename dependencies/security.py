from typing import Optional, Annotated

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from database.db import get_db
from models.users import User
from services import records

AuthHeader = Annotated[Optional[str], Header(alias="Authorization")]


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=401,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(authorization: AuthHeader = None, db: Session = Depends(get_db)) -> User:
    if not authorization:
        raise _unauthorized("Missing Authorization header")

    # "Bearer <token>"
    try:
        scheme, token = authorization.split(" ", 1)
    except ValueError:
        raise _unauthorized("Invalid Authorization header format")

    if scheme.lower() != "bearer":
        raise _unauthorized("Invalid auth scheme")

    user = records.fetch_user_by_token(db, token.strip())
    if user is None:
        raise _unauthorized("Invalid token")
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from schemas.common import CamelModel


def _normalize_email(v):
    v = str(v).strip().lower()
    if "@" not in v or v.startswith("@") or v.endswith("@"):
        raise ValueError("Please provide a valid email")
    return v


# request: POST /auth/register
class RegisterRequest(CamelModel):
    name: str = Field(..., min_length=1)
    email: str
    password: str
    degree_name: Optional[str] = None
    degree_total_credits: Optional[int] = Field(None, ge=1)

    normalize_email = field_validator("email", mode="before")(_normalize_email)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return str(v).strip() if v is not None else v


# request: POST /auth/login
class LoginRequest(BaseModel):
    email: str
    password: str

    normalize_email = field_validator("email", mode="before")(_normalize_email)


class CreditCategories(CamelModel):
    """Informational credit buckets (never reconciled against subjects)."""
    core_subjects: int = Field(..., ge=0)
    major_requirements: int = Field(..., ge=0)
    electives: int = Field(..., ge=0)
    general_education: int = Field(..., ge=0)


class UserOut(CamelModel):
    id: int
    name: str
    email: str
    degree_name: str
    degree_total_credits: int


class AuthOut(CamelModel):
    user: UserOut
    token: str

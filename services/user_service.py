import logging

from sqlalchemy.orm import Session

from config.settings import settings
from models.users import User as UserModel
from schemas.users import CreditCategories, LoginRequest, RegisterRequest
from services import records
from services.errors import AuthError, ConflictError, ValidationError
from services.grading.progress import validate_degree_update
from utils.security import generate_token, hash_password, verify_password

logger = logging.getLogger(__name__)


def register(db: Session, payload: RegisterRequest) -> UserModel:
    if len(payload.password) < settings.PASSWORD_MIN_LENGTH:
        raise ValidationError(f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters")
    if records.fetch_user_by_email(db, payload.email) is not None:
        raise ConflictError("User already exists")

    degree_name = (payload.degree_name or "").strip() or settings.DEFAULT_DEGREE_NAME
    user = UserModel(
        name=payload.name,
        email=payload.email,
        password_hash=hash_password(payload.password),
        api_token=generate_token(),
        degree_name=degree_name,
        degree_total_credits=payload.degree_total_credits or settings.DEFAULT_DEGREE_TOTAL_CREDITS,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"user registered: id={user.id}")
    return user


def login(db: Session, payload: LoginRequest) -> UserModel:
    user = records.fetch_user_by_email(db, payload.email)
    if user is None or not verify_password(payload.password, user.password_hash):
        logger.warning("login rejected: bad credentials")
        raise AuthError("Invalid credentials")
    return user


def update_degree(db: Session, user: UserModel, total_credits=None, degree_name=None) -> UserModel:
    update = validate_degree_update(total_credits=total_credits, degree_name=degree_name)
    fields = {}
    if update.degree_total_credits is not None:
        fields["degree_total_credits"] = update.degree_total_credits
    if update.degree_name is not None:
        fields["degree_name"] = update.degree_name
    user = records.save_user_profile(db, user, **fields)
    logger.info(f"degree updated: user_id={user.id} fields={sorted(fields)}")
    return user


def get_credit_categories(user: UserModel) -> CreditCategories:
    return CreditCategories(
        core_subjects=user.core_subjects,
        major_requirements=user.major_requirements,
        electives=user.electives,
        general_education=user.general_education,
    )


def update_credit_categories(db: Session, user: UserModel, payload: CreditCategories) -> CreditCategories:
    user = records.save_user_profile(db, user, **payload.model_dump())
    logger.info(f"credit categories updated: user_id={user.id}")
    return get_credit_categories(user)

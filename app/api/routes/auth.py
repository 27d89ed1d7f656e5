import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.api.access import CallerContext, role_for
from app.api.deps import get_db, get_current_caller
from app.core.config import get_settings
from app.schemas.auth import (
    AdminRegisterRequest,
    AdminRegisterResponse,
    FormDescriptor,
    FormField,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    MeResponse,
    ProfileOut,
)
from app.services import identity
from app.services.auth import get_profile, register_admin

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/login", response_model=FormDescriptor)
def login_form() -> FormDescriptor:
    return FormDescriptor(
        view="login",
        action="/login",
        fields=[
            FormField(name="email", type="email"),
            FormField(name="password", type="password"),
        ],
    )


@router.post("/login", response_model=LoginResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)) -> LoginResponse:
    try:
        token, user = identity.sign_in(db, request.email, request.password)
    except identity.InvalidCredentialsError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc

    profile = get_profile(db, user)
    return LoginResponse(
        access_token=token,
        token_type="bearer",
        role=role_for(profile).value,
        profile=ProfileOut.model_validate(profile) if profile else None,
    )


@router.post("/logout", response_model=LogoutResponse)
def logout(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_current_caller),
) -> LogoutResponse:
    identity.sign_out(db, caller.session.id)
    return LogoutResponse(ok=True)


@router.get("/me", response_model=MeResponse)
def me(caller: CallerContext = Depends(get_current_caller)) -> MeResponse:
    return MeResponse(
        role=caller.role.value,
        email=caller.user.email,
        profile=ProfileOut.model_validate(caller.profile) if caller.profile else None,
    )


@router.get("/admin-register", response_model=FormDescriptor)
def admin_register_form() -> FormDescriptor:
    return FormDescriptor(
        view="admin-register",
        action="/admin-register",
        fields=[
            FormField(name="full_name", type="text"),
            FormField(name="email", type="email"),
            FormField(name="password", type="password"),
            FormField(name="confirm_password", type="password"),
        ],
        signup_enabled=get_settings().signup_enabled,
    )


@router.post("/admin-register", response_model=AdminRegisterResponse, status_code=status.HTTP_201_CREATED)
def admin_register(request: AdminRegisterRequest, db: Session = Depends(get_db)) -> AdminRegisterResponse:
    try:
        profile = register_admin(db, request.email, request.password, request.full_name)
    except identity.SignupDisabledError as exc:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    except (identity.UserAlreadyRegisteredError, identity.WeakPasswordError) as exc:
        logger.warning(f"Admin registration rejected for {request.email}: {exc}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return AdminRegisterResponse(ok=True, profile=ProfileOut.model_validate(profile))

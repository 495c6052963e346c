"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict

from juicebox.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
)
from juicebox.application.usecase.user import (
    GetUserRequest,
    GetUserUseCase,
    ListUsersResponse,
    ListUsersUseCase,
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
)
from juicebox.domain.model import PublicUser, UserProfile
from juicebox.domain.service import JWTService
from juicebox.interface.api.auth import bearer_token, require_user

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateMeAPIRequest(BaseModel):
    """API request for updating the current user."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    location: str | None = None
    password: str | None = None


@router.get("", response_model=ListUsersResponse)
async def list_users(use_case: FromDishka[ListUsersUseCase]) -> ListUsersResponse:
    """List every user (no credentials)."""
    return await use_case.execute()


@router.post(
    "/register",
    response_model=RegisterUserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterUserRequest,
    use_case: FromDishka[RegisterUserUseCase],
) -> RegisterUserResponse:
    """Create an account and return a token for it.

    A taken username answers 409 ``UserExistsError``.
    """
    return await use_case.execute(request)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    use_case: FromDishka[LoginUseCase],
) -> LoginResponse:
    """Exchange a username/password pair for a token.

    Wrong credentials answer 401 ``IncorrectCredentialsError``.
    """
    return await use_case.execute(request)


@router.get("/me", response_model=UserProfile)
async def get_me(
    get_user_use_case: FromDishka[GetUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(bearer_token),
) -> UserProfile:
    """Get the requester's own profile, inactive posts included."""
    user = await require_user(token, get_current_user_use_case)
    return await get_user_use_case.execute(
        GetUserRequest(user_id=user.id, requester_id=user.id)
    )


@router.patch("/me", response_model=PublicUser)
async def update_me(
    request: UpdateMeAPIRequest,
    update_user_use_case: FromDishka[UpdateUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(bearer_token),
) -> PublicUser:
    """Update the requester's name, location or password."""
    user = await require_user(token, get_current_user_use_case)

    # name and location may be cleared with null, the password may not
    fields = request.model_dump(exclude_unset=True)
    if fields.get("password") is None:
        fields.pop("password", None)

    return await update_user_use_case.execute(
        UpdateUserRequest(user_id=user.id, fields=fields)
    )


@router.get("/{user_id}", response_model=UserProfile)
async def get_user(
    user_id: int,
    use_case: FromDishka[GetUserUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> UserProfile:
    """Get a user's profile and the posts visible to the requester."""
    requester_id = jwt_service.get_user_id_from_token(token)
    return await use_case.execute(
        GetUserRequest(user_id=user_id, requester_id=requester_id)
    )

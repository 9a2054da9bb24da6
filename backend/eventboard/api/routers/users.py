from fastapi import APIRouter, Depends, HTTPException, status

from eventboard.api.deps import get_current_user, get_token_manager, get_user_service
from eventboard.api.errors import internal_error
from eventboard.api.serializers import user_to_dict
from eventboard.core.errors import AlreadyExistsError, InvalidCredentialsError, NotFoundError
from eventboard.core.security import TokenManager
from eventboard.models.user import User
from eventboard.schemas import CreateUserRequest, LoginUserRequest, UpdateUserRequest
from eventboard.services import UserService

router = APIRouter(prefix="/users", tags=["users"])


def _not_found(user_id: int, action: str = "was not found") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"User with an id {user_id} {action}",
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    body: CreateUserRequest,
    users: UserService = Depends(get_user_service),
    tokens: TokenManager = Depends(get_token_manager),
):
    """
    Register a new user account and return an access token.

    The password is hashed before storage; neither the password nor its hash
    is ever part of the response.

    Args:
        body: Request body containing:
            - username: str (at least 5 characters)
            - email: str (valid email, unique among live users)
            - password: str (at least 6 characters)

    Returns:
        dict: {"token": <JWT access token>}

    Raises:
        HTTPException (400): Validation failed or email already registered
        HTTPException (500): Unexpected failure
    """
    try:
        user_id = await users.create_user(body)
        token = tokens.issue(user_id)
    except AlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A user with this email already exists",
        )
    except Exception:
        raise internal_error("Failed to create user")
    return {"token": token}


@router.post("/login")
async def login(
    body: LoginUserRequest,
    users: UserService = Depends(get_user_service),
    tokens: TokenManager = Depends(get_token_manager),
):
    """
    Authenticate by email and password and return an access token.

    An unknown email and a wrong password produce the same 401 so the
    endpoint cannot be used to probe which emails are registered.

    Raises:
        HTTPException (400): Validation failed
        HTTPException (401): Invalid credentials
        HTTPException (500): Unexpected failure
    """
    try:
        user_id = await users.login(body)
        token = tokens.issue(user_id)
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    except Exception:
        raise internal_error("Failed to log in")
    return {"token": token}


@router.get("")
async def list_users(users: UserService = Depends(get_user_service)):
    """Get all live (not deleted) users."""
    try:
        rows = await users.get_users()
    except Exception:
        raise internal_error("Failed to retrieve users")
    return {"users": [user_to_dict(u) for u in rows]}


# Declared before /{user_id} so "me" is not parsed as an id
@router.get("/me")
async def me(user: User = Depends(get_current_user)):
    """
    Get the currently authenticated user.

    Raises:
        HTTPException (401): Missing, invalid or expired token
        HTTPException (403): Token user no longer exists
    """
    return {"user": user_to_dict(user)}


@router.get("/{user_id}")
async def get_user(user_id: int, users: UserService = Depends(get_user_service)):
    try:
        user = await users.get_user(user_id)
    except NotFoundError:
        raise _not_found(user_id)
    except Exception:
        raise internal_error("Failed to retrieve user")
    return {"user": user_to_dict(user)}


@router.put("/{user_id}")
async def update_user(
    user_id: int,
    body: UpdateUserRequest,
    users: UserService = Depends(get_user_service),
):
    """
    Update a user. All fields are optional; only non-empty fields are applied
    and a new password is hashed before storage.

    Raises:
        HTTPException (400): Validation failed or email already registered
        HTTPException (404): User not found
        HTTPException (500): Unexpected failure
    """
    try:
        await users.update_user(user_id, body)
    except NotFoundError:
        raise _not_found(user_id, "could not be updated")
    except AlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A user with this email already exists",
        )
    except Exception:
        raise internal_error("Failed to update user")
    return {"message": "User updated successfully"}


@router.delete("/{user_id}")
async def delete_user(user_id: int, users: UserService = Depends(get_user_service)):
    """Soft-delete a user; it disappears from every subsequent read."""
    try:
        await users.delete_user(user_id)
    except NotFoundError:
        raise _not_found(user_id)
    except Exception:
        raise internal_error("Failed to delete user")
    return {"message": "User deleted successfully"}

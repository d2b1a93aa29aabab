"""
Account Endpoints

Signup and login. Passwords are compared as plaintext; there are no tokens,
clients send the returned user id as ``X-User-Id`` on later requests.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from alumni_hub.config import settings
from alumni_hub.exceptions import DuplicateRecordError
from alumni_hub.schemas.person import LoginRequest, Person, SignupRequest
from alumni_hub.services.database import DatabaseService, get_db
from alumni_hub.utils.logger import get_logger
from alumni_hub.utils.validators import validate_signup

router = APIRouter()
logger = get_logger(__name__)


@router.post("/signup", response_model=Person, status_code=status.HTTP_201_CREATED)
def signup(request: SignupRequest, db: DatabaseService = Depends(get_db)):
    """
    Register a new account.

    Args:
        request: Signup request

    Returns:
        Person: The created account
    """
    is_valid, error = validate_signup(request.email, request.password)
    if not is_valid:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error)

    try:
        profile = request.model_dump(exclude={"email", "password", "name", "user_type"})
        profile["college"] = profile.get("college") or settings.DEFAULT_COLLEGE
        return db.create_user(
            email=request.email.strip(),
            password=request.password,
            name=request.name.strip(),
            user_type=request.user_type,
            **profile,
        )

    except DuplicateRecordError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to sign up: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to sign up: {str(e)}",
        )


@router.post("/login", response_model=Person)
def login(request: LoginRequest, db: DatabaseService = Depends(get_db)):
    """
    Check credentials.

    Args:
        request: Login request

    Returns:
        Person: The authenticated account
    """
    user = db.authenticate_user(request.email.strip(), request.password)
    if user is None:
        logger.warning("Failed login attempt", email=request.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password"
        )

    logger.info("User logged in", user_id=user.id)
    return user

# backend/routes/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from services.auth import Authenticator
from schemas import user as schemas
from utils.audit import write_log
from utils.dependencies import get_authenticator
from utils.errors import InvalidCredentialsError

router = APIRouter(prefix="/auth", tags=["Auth"])


# Check credentials and return the user's public details
@router.post("/login", response_model=schemas.LoginResponse)
def login(
    payload: schemas.UserLogin,
    db: Session = Depends(get_db),
    authenticator: Authenticator = Depends(get_authenticator),
):
    try:
        user = authenticator.authenticate(payload.username, payload.password)
    except InvalidCredentialsError:
        write_log(db, action="LOGIN", resource="auth", status="FAIL", meta={"username": payload.username})
        raise

    write_log(db, user_id=user.id, action="LOGIN", resource="auth", status="SUCCESS", meta={"username": user.username})

    # No session token: the client keeps the returned user
    return {"user": {"id": user.id, "username": user.username}}

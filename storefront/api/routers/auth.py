from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.domain.schemas import LoginIn, TokenOut
from storefront.services.auth_service import AuthService

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=TokenOut)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    return AuthService(db).login(payload.email, payload.password)

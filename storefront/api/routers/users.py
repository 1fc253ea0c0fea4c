from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import require_auth
from storefront.data.database import get_db
from storefront.domain.schemas import Message, UserCreate, UserRead, UserUpdate
from storefront.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserRead, status_code=201)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    return UserService(db).create_user(payload)


@router.get("", response_model=List[UserRead], dependencies=[Depends(require_auth)])
def list_users(db: Session = Depends(get_db)):
    return UserService(db).list_users()


@router.get("/{user_id}", response_model=UserRead, dependencies=[Depends(require_auth)])
def get_user(user_id: int, db: Session = Depends(get_db)):
    return UserService(db).get_user(user_id)


@router.put("/{user_id}", response_model=UserRead, dependencies=[Depends(require_auth)])
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db)):
    return UserService(db).update_user(user_id, payload)


@router.delete("/{user_id}", response_model=Message, dependencies=[Depends(require_auth)])
def delete_user(user_id: int, db: Session = Depends(get_db)):
    UserService(db).delete_user(user_id)
    return Message(message="User deleted")

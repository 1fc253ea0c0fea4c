from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.user import UserModel
from storefront.domain.errors import EmailAlreadyRegistered, NotFound
from storefront.domain.schemas import UserCreate, UserRead, UserUpdate
from storefront.repos.user_repo import UserRepo
from storefront.utils.logging import get_logger
from storefront.utils.security import get_password_hash

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def _get_or_404(self, user_id: int) -> UserModel:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFound("User not found")
        return user

    def create_user(self, payload: UserCreate) -> UserRead:
        data = payload.model_dump(exclude={"password"})
        user = UserModel(**data, password_hash=get_password_hash(payload.password))
        try:
            created = self.repo.create_user(user)
        except IntegrityError:
            self.repo.rollback()
            raise EmailAlreadyRegistered()

        logger.info(f"Registered user {created.id}")
        return UserRead.model_validate(created)

    def get_user(self, user_id: int) -> UserRead:
        return UserRead.model_validate(self._get_or_404(user_id))

    def list_users(self) -> List[UserRead]:
        return [UserRead.model_validate(u) for u in self.repo.list_users()]

    def update_user(self, user_id: int, payload: UserUpdate) -> UserRead:
        user = self._get_or_404(user_id)

        # coalesce: tylko pola podane i nie-null
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        password = changes.pop("password", None)
        if password is not None:
            changes["password_hash"] = get_password_hash(password)

        if not changes:
            return UserRead.model_validate(user)

        try:
            updated = self.repo.update_user(user, changes)
        except IntegrityError:
            self.repo.rollback()
            raise EmailAlreadyRegistered()

        logger.info(f"Updated user {user_id}: {sorted(changes)}")
        return UserRead.model_validate(updated)

    def delete_user(self, user_id: int) -> None:
        user = self._get_or_404(user_id)
        self.repo.delete_user(user)
        logger.info(f"Deleted user {user_id}")

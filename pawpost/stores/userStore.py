from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pawpost.core.errors import DuplicateEmail, NotFound, StoreError
from pawpost.models.user import User


class UserStore:
    def __init__(self, db: Session):
        self.db = db

    def create(self, email: str, password_hash: str) -> User:
        new_user = User(email=email, password=password_hash)
        try:
            self.db.add(new_user)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            raise DuplicateEmail(f"email {email!r} is already registered") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(f"could not create user {email!r}") from exc
        self.db.refresh(new_user)
        return new_user

    def find_by_email(self, email: str) -> User:
        try:
            user = self.db.query(User).filter(User.email == email).first()
        except SQLAlchemyError as exc:
            raise StoreError(f"could not look up user {email!r}") from exc
        if user is None:
            raise NotFound(f"no user with email {email!r}", detail="User not found")
        return user


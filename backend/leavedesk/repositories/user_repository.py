from sqlalchemy.orm import Session
from leavedesk.models.user import User
from typing import Optional, List

class UserRepository:
    def get_by_user_id(self, db: Session, user_id: str) -> Optional[User]:
        return db.query(User).filter(User.user_id == user_id).first()

    def create(self, db: Session, user: User) -> User:
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    def update(self, db: Session, user: User) -> User:
        db.commit()
        db.refresh(user)
        return user

    def delete(self, db: Session, user_id: str) -> bool:
        user = self.get_by_user_id(db, user_id)
        if user:
            db.delete(user)
            db.commit()
            return True
        return False

    def count(self, db: Session) -> int:
        return db.query(User).count()

    def get_all(self, db: Session) -> List[User]:
        return db.query(User).all()

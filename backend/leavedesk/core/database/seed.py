"""
Schema creation and initial admin seeding, shared by the init script.
"""
import logging
from typing import Optional
from sqlalchemy.orm import Session
from leavedesk.core.database.base import DatabaseClient
from leavedesk.core.security import get_password_hash
from leavedesk.models.user import User

logger = logging.getLogger(__name__)

def ensure_admin(
    db: Session,
    user_id: str,
    password: Optional[str] = None,
    name: Optional[str] = None,
    email: Optional[str] = None,
    mobile: Optional[str] = None,
) -> User:
    """
    Make sure ``user_id`` exists and is an admin.

    An existing user is promoted and keeps its password. A new user needs a
    password.
    """
    user = db.query(User).filter(User.user_id == user_id).first()
    if user:
        if not user.is_admin:
            user.is_admin = True
            db.commit()
            logger.info("[INIT] Existing user %s promoted to admin", user_id)
        else:
            logger.info("[INIT] Admin %s already exists", user_id)
        return user

    if not password:
        raise ValueError(f"User '{user_id}' does not exist and no password was provided")

    user = User(
        user_id=user_id,
        name=name,
        email=email,
        mobile=mobile,
        password=get_password_hash(password),
        is_admin=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("[INIT] Admin user created: %s", user_id)
    return user

def init_database(client: DatabaseClient, admin_user_id: Optional[str] = None, **admin_fields) -> bool:
    """Create the schema and, when an admin id is given, seed that admin"""
    from leavedesk.core.database import init_db

    init_db(client)
    if not admin_user_id:
        logger.warning("[INIT] No admin user_id provided - schema created without seeding an admin")
        return True

    db = client.get_session()
    try:
        ensure_admin(db, admin_user_id, **admin_fields)
        return True
    except Exception:
        db.rollback()
        logger.exception("[INIT] Seeding admin %s failed", admin_user_id)
        return False
    finally:
        db.close()

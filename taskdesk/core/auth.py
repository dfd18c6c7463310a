import logging
from typing import Optional

from taskdesk.core.store import Store
from taskdesk.models.models import User

logger = logging.getLogger(__name__)


def authenticate(store: Store, username: str, password: str) -> Optional[User]:
    # Plaintext comparison; passwords are stored as given.
    user = store.get_user_by_username(username)
    if not user or user.password != password:
        logger.warning("Login failed username=%s", username)
        return None
    logger.info("Login ok user_id=%s role=%s", user.id, user.role.value)
    return user

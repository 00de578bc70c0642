# storefront/services/login_service.py
import secrets

from storefront.services.session_store import UserSession, USERNAME_KEY
from storefront.utils.settings import ADMIN_USERNAME, ADMIN_PASSWORD
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class LoginService:
    """Single configured account; the principal lives in the session under "username"."""

    def __init__(self, username: str | None = None, password: str | None = None):
        self.username = username or ADMIN_USERNAME
        self.password = password or ADMIN_PASSWORD
        # successful logins since the process started
        self.login_count = 0

    @staticmethod
    def get_username(session: UserSession) -> str | None:
        username = session.get(USERNAME_KEY)
        return username if username else None

    def authenticate(self, username: str | None, password: str | None) -> bool:
        if username is None or password is None:
            return False
        return secrets.compare_digest(username, self.username) and secrets.compare_digest(
            password, self.password
        )

    def login(self, session: UserSession, username: str, password: str) -> bool:
        if not self.authenticate(username, password):
            logger.info(f"Failed login for user {username!r}")
            return False

        session.set(USERNAME_KEY, username)
        self.login_count += 1
        logger.info(f"User {username} logged in ({self.login_count} logins)")
        return True

    @staticmethod
    def logout(session: UserSession) -> None:
        username = session.get(USERNAME_KEY)
        if username:
            logger.info(f"User {username} logged out")
            session.invalidate()

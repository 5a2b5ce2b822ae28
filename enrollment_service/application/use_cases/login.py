import structlog

from ...domain.entities import User
from ..dto import LoginResult
from ..errors import Unauthenticated

logger = structlog.get_logger()


class IUserStore:
    def find_user_by_credentials(self, username: str, password: str) -> User | None: ...


class ITokenIssuer:
    def issue(self, user: User) -> str: ...


class LoginUser:
    def __init__(self, store: IUserStore, tokens: ITokenIssuer):
        self.store = store
        self.tokens = tokens

    def execute(self, username: str, password: str) -> LoginResult:
        # Plaintext comparison against the seeded records.
        user = self.store.find_user_by_credentials(username, password)
        if user is None:
            logger.warning("login_failed", username=username)
            raise Unauthenticated("Invalid username or password!")
        logger.info("login_succeeded", username=user.username, role=user.role.value)
        return LoginResult(username=user.username, token=self.tokens.issue(user))

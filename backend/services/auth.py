# backend/services/auth.py
import logging
from typing import Protocol

from models.users import User
from services.store import EntityStore
from utils.errors import InvalidCredentialsError

logger = logging.getLogger(__name__)


class Authenticator(Protocol):
    def authenticate(self, username: str, password: str) -> User: ...


class PlaintextAuthenticator:
    """Compares the supplied password with the stored one, as is."""

    def __init__(self, store: EntityStore):
        self.store = store

    def authenticate(self, username: str, password: str) -> User:
        user = self.store.get_user_by_username(username)
        if user is None or user.password != password:
            raise InvalidCredentialsError()
        return user


def seed_admin(store: EntityStore, username: str, password: str) -> User:
    # Ensure the bootstrap account exists exactly once
    user = store.get_user_by_username(username)
    if user is None:
        user = store.create_user({"username": username, "password": password})
        logger.info("Created default user %r", username)
    return user

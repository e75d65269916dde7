# ============================================================================
# FILE: songbook/services/user_service.py
# ============================================================================
from typing import Any, Mapping, Optional, Union
from pydantic import ValidationError
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from songbook.config import settings
from songbook.core.exceptions import (
    DuplicateError,
    InvalidInputError,
    NotFoundError,
    UnauthorizedError,
)
from songbook.core.security import get_password_hash, verify_password
from songbook.core.sql import sql_for_partial_update
from songbook.db.models.user import User
from songbook.schemas.user import UserCreate, UserDetail, UserProfile, UserUpdate
from songbook.services.playlist_service import PlaylistService, playlist_service
import logging

logger = logging.getLogger(__name__)

# Wire field name -> users column
USER_COLUMNS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "imgUrl": "img_url",
}

class UserService:
    """Service layer for user operations"""

    def __init__(self, playlists: PlaylistService = playlist_service):
        self.playlists = playlists

    def get_user_by_username(self, db: Session, username: str) -> Optional[User]:
        """Get user by username"""
        return db.query(User).filter(User.username == username).first()

    def _enrich(self, db: Session, user: User) -> UserDetail:
        """Attach favorite song ids and owned playlists to a profile"""
        detail = UserDetail.model_validate(user)
        detail.favorite_songs = self.playlists._favorite_song_ids(db, user.username)
        detail.playlists = self.playlists._user_playlists(db, user.username)
        return detail

    def authenticate_user(self, db: Session, username: str, password: str) -> UserProfile:
        """
        Authenticate user with username and password.
        Unknown user and wrong password raise the same error.
        """
        user = self.get_user_by_username(db, username)
        if user and verify_password(password, user.password):
            return UserProfile.model_validate(user)
        raise UnauthorizedError("Invalid username/password")

    def register(self, db: Session, user_data: UserCreate) -> UserProfile:
        """
        Create a new user account and its favorites playlist.
        A missing or empty image gets the default profile picture.
        """
        if self.get_user_by_username(db, user_data.username):
            raise DuplicateError(f"Duplicate username: {user_data.username}")

        try:
            user = User(
                username=user_data.username,
                password=get_password_hash(user_data.password),
                first_name=user_data.first_name,
                last_name=user_data.last_name,
                email=user_data.email,
                img_url=user_data.img_url or settings.DEFAULT_USER_IMG_URL
            )
            db.add(user)
            db.flush()

            self.playlists._insert_playlist(
                db,
                settings.FAVORITES_PLAYLIST_NAME,
                settings.FAVORITES_PLAYLIST_IMG_URL,
                user.username
            )
            db.commit()
            db.refresh(user)
            logger.info(f"User created: {user.username}")
            return UserProfile.model_validate(user)
        except IntegrityError as e:
            db.rollback()
            logger.error(f"Error creating user: {e}")
            raise DuplicateError(f"Duplicate username: {user_data.username}")
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating user: {e}")
            raise

    def get_user(self, db: Session, username: str) -> UserDetail:
        """Get a user's profile with favorite song ids and playlists"""
        user = self.get_user_by_username(db, username)
        if not user:
            raise NotFoundError(f"No user: {username}")
        return self._enrich(db, user)

    def update_user(
        self,
        db: Session,
        username: str,
        update_data: Union[UserUpdate, Mapping[str, Any]]
    ) -> UserDetail:
        """
        Partially update a user's profile.

        The password is required and only confirms the caller; it is never
        changed here. Fields that are not sent keep their value, except the
        image, which falls back to the default when not sent.
        """
        if not isinstance(update_data, UserUpdate):
            try:
                update_data = UserUpdate.model_validate(update_data)
            except ValidationError as e:
                raise InvalidInputError(f"Invalid update data: {e}")
        changes = update_data.model_dump(exclude_unset=True, exclude_none=True, by_alias=True)

        try:
            user = self.get_user_by_username(db, username)
            if not user:
                raise NotFoundError(f"No user: {username}")

            if not changes:
                raise InvalidInputError("No data")

            password = changes.get("password")
            if not password:
                raise InvalidInputError("Password is required to update profile")
            if len(changes) == 1:
                raise InvalidInputError("No data")
            if not verify_password(password, user.password):
                raise UnauthorizedError("Incorrect password")

            if not changes.get("imgUrl"):
                changes.pop("imgUrl", None)
            update = sql_for_partial_update(changes, USER_COLUMNS)
            set_clause, params = update.as_bind_params()
            params["username"] = username

            db.execute(
                text(f"UPDATE users SET {set_clause} WHERE username = :username"),
                params
            )

            # The raw UPDATE bypasses the identity map; reload before reading back
            db.expire(user)
            detail = self._enrich(db, user)
            db.commit()
            logger.info(f"User updated: {username}")
            return detail
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating user: {e}")
            raise

# Create singleton instance
user_service = UserService()

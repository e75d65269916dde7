# ============================================================================
# FILE: songbook/services/playlist_service.py
# ============================================================================
from typing import List, Optional, Union
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from songbook.config import settings
from songbook.core.exceptions import (
    BadRequestError,
    DuplicateError,
    InvalidInputError,
    NotFoundError,
)
from songbook.db.models.playlist import Playlist, PlaylistSong
from songbook.db.models.user import User
from songbook.schemas.playlist import (
    PlaylistCreate,
    PlaylistDeleted,
    PlaylistDetail,
    PlaylistResponse,
    PlaylistUpdate,
    SongAdded,
    SongDeleted,
)
import logging

logger = logging.getLogger(__name__)

PlaylistId = Union[int, str]

class PlaylistService:
    """
    Service layer for playlists, playlist songs and favorites.

    Every public method is one transaction: it commits when all of its steps
    succeed and rolls back otherwise. The underscored helpers only flush, so
    other services can compose them inside their own transaction.
    """

    # ------------------------------------------------------------------
    # Lookups and non-committing helpers
    # ------------------------------------------------------------------

    def _get_playlist_row(self, db: Session, playlist_id: PlaylistId) -> Optional[Playlist]:
        # Only real ints and digit strings; floats and bools are not ids
        if isinstance(playlist_id, str) and playlist_id.isascii() and playlist_id.isdigit():
            playlist_id = int(playlist_id)
        elif isinstance(playlist_id, bool) or not isinstance(playlist_id, int):
            return None
        return db.query(Playlist).filter(Playlist.id == playlist_id).first()

    def _require_playlist(self, db: Session, playlist_id: PlaylistId) -> Playlist:
        playlist = self._get_playlist_row(db, playlist_id)
        if not playlist:
            raise NotFoundError(f"No playlist found: {playlist_id}")
        return playlist

    def _require_user(self, db: Session, username: str) -> None:
        exists = db.query(User.username).filter(User.username == username).first()
        if not exists:
            raise NotFoundError(f"No username: {username}")

    def _get_membership(self, db: Session, playlist_id: int, song_id: str) -> Optional[PlaylistSong]:
        return db.query(PlaylistSong).filter(
            PlaylistSong.playlist_id == playlist_id,
            PlaylistSong.song_id == song_id
        ).first()

    def _song_ids(self, db: Session, playlist_id: int) -> List[str]:
        rows = db.query(PlaylistSong.song_id).filter(
            PlaylistSong.playlist_id == playlist_id
        ).order_by(PlaylistSong.id).all()
        return [row.song_id for row in rows]

    def _insert_playlist(self, db: Session, name: str, img_url: Optional[str], username: str) -> Playlist:
        playlist = Playlist(
            name=name,
            img_url=img_url or settings.DEFAULT_PLAYLIST_IMG_URL,
            username=username
        )
        db.add(playlist)
        db.flush()
        return playlist

    def _add_song(self, db: Session, playlist_id: int, song_id: str, duplicate_message: str) -> str:
        if self._get_membership(db, playlist_id, song_id):
            raise DuplicateError(duplicate_message)

        db.add(PlaylistSong(playlist_id=playlist_id, song_id=song_id))
        try:
            db.flush()
        except IntegrityError:
            # Lost a race: either the same pair was inserted or the playlist was deleted
            db.rollback()
            if not self._get_playlist_row(db, playlist_id):
                raise NotFoundError(f"No playlist found: {playlist_id}")
            raise DuplicateError(duplicate_message)
        return song_id

    def _favorites_playlist_id(self, db: Session, username: str) -> int:
        row = db.query(Playlist.id).filter(
            Playlist.username == username,
            Playlist.name == settings.FAVORITES_PLAYLIST_NAME
        ).order_by(Playlist.id).first()
        if not row:
            raise NotFoundError(f"No favorites playlist for user: {username}")
        return row.id

    def _favorite_song_ids(self, db: Session, username: str) -> List[str]:
        """Song ids in the favorites playlist; empty if the user has none"""
        try:
            favorites_id = self._favorites_playlist_id(db, username)
        except NotFoundError:
            return []
        return self._song_ids(db, favorites_id)

    def _user_playlists(self, db: Session, username: str) -> List[PlaylistResponse]:
        playlists = db.query(Playlist).filter(
            Playlist.username == username
        ).order_by(Playlist.id).all()
        return [PlaylistResponse.model_validate(p) for p in playlists]

    # ------------------------------------------------------------------
    # Playlists
    # ------------------------------------------------------------------

    def create_playlist(self, db: Session, username: str, playlist_data: PlaylistCreate) -> PlaylistResponse:
        """Create a new playlist for a user; a missing image gets the default artwork"""
        try:
            playlist = self._insert_playlist(db, playlist_data.name, playlist_data.img_url, username)
            db.commit()
            db.refresh(playlist)
            logger.info(f"Playlist created: {playlist.id} for user {username}")
            return PlaylistResponse.model_validate(playlist)
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating playlist: {e}")
            raise

    def get_user_playlists(self, db: Session, username: str) -> List[PlaylistResponse]:
        """Get all playlists for a user, favorites included"""
        return self._user_playlists(db, username)

    def get_playlist(self, db: Session, playlist_id: PlaylistId) -> PlaylistDetail:
        """Get a playlist with the ordered ids of its songs"""
        playlist = self._require_playlist(db, playlist_id)
        detail = PlaylistDetail.model_validate(playlist)
        detail.tracks = self._song_ids(db, playlist.id)
        return detail

    def get_favorites_playlist(self, db: Session, username: str) -> PlaylistDetail:
        """Get the reserved favorites playlist of a user"""
        self._require_user(db, username)
        return self.get_playlist(db, self._favorites_playlist_id(db, username))

    def update_playlist(self, db: Session, playlist_id: PlaylistId, update_data: PlaylistUpdate) -> PlaylistResponse:
        """Update playlist details"""
        if update_data.name is None and update_data.img_url is None:
            raise InvalidInputError("No data")

        try:
            playlist = self._require_playlist(db, playlist_id)
            if update_data.name is not None:
                playlist.name = update_data.name
            if update_data.img_url is not None:
                playlist.img_url = update_data.img_url or settings.DEFAULT_PLAYLIST_IMG_URL

            db.commit()
            db.refresh(playlist)
            logger.info(f"Playlist updated: {playlist_id}")
            return PlaylistResponse.model_validate(playlist)
        except Exception as e:
            db.rollback()
            logger.error(f"Error updating playlist: {e}")
            raise

    def delete_playlist(self, db: Session, playlist_id: PlaylistId) -> PlaylistDeleted:
        """Delete a playlist together with its songs"""
        try:
            playlist = self._require_playlist(db, playlist_id)
            deleted_id = playlist.id
            db.delete(playlist)
            db.commit()
            logger.info(f"Playlist deleted: {deleted_id}")
            return PlaylistDeleted(deleted=deleted_id)
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting playlist: {e}")
            raise

    # ------------------------------------------------------------------
    # Playlist songs
    # ------------------------------------------------------------------

    def add_song_to_playlist(self, db: Session, playlist_id: PlaylistId, song_id: str) -> SongAdded:
        """Add a song to a playlist; adding it twice is an error"""
        song_id = str(song_id)
        try:
            playlist = self._require_playlist(db, playlist_id)
            added = self._add_song(db, playlist.id, song_id, f"Song already in playlist: {song_id}")
            db.commit()
            logger.info(f"Song added to playlist {playlist.id}: {song_id}")
            return SongAdded(added=added)
        except Exception as e:
            db.rollback()
            logger.error(f"Error adding song to playlist: {e}")
            raise

    def remove_song_from_playlist(self, db: Session, playlist_id: PlaylistId, song_id: str) -> SongDeleted:
        """Remove a song from a playlist; a song that is not there is a bad request"""
        song_id = str(song_id)
        try:
            playlist = self._require_playlist(db, playlist_id)
            playlist_song = self._get_membership(db, playlist.id, song_id)
            if not playlist_song:
                raise BadRequestError(f"No song: {song_id}")

            db.delete(playlist_song)
            db.commit()
            logger.info(f"Song removed from playlist {playlist.id}: {song_id}")
            return SongDeleted(deleted=song_id)
        except Exception as e:
            db.rollback()
            logger.error(f"Error removing song from playlist: {e}")
            raise

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    def add_song_to_favorites(self, db: Session, username: str, song_id: str) -> SongAdded:
        """Add a song to the user's favorites playlist"""
        song_id = str(song_id)
        try:
            self._require_user(db, username)
            favorites_id = self._favorites_playlist_id(db, username)
            added = self._add_song(db, favorites_id, song_id, f"Song already in favorites: {song_id}")
            db.commit()
            logger.info(f"Song added to favorites of {username}: {song_id}")
            return SongAdded(added=added)
        except Exception as e:
            db.rollback()
            logger.error(f"Error adding song to favorites: {e}")
            raise

    def remove_song_from_favorites(self, db: Session, username: str, song_id: str) -> SongDeleted:
        """Remove a song from the user's favorites; a missing song is not found"""
        song_id = str(song_id)
        try:
            self._require_user(db, username)
            favorites_id = self._favorites_playlist_id(db, username)
            playlist_song = self._get_membership(db, favorites_id, song_id)
            if not playlist_song:
                raise NotFoundError(f"No song: {song_id}")

            db.delete(playlist_song)
            db.commit()
            logger.info(f"Song removed from favorites of {username}: {song_id}")
            return SongDeleted(deleted=song_id)
        except Exception as e:
            db.rollback()
            logger.error(f"Error removing song from favorites: {e}")
            raise

# Create singleton instance
playlist_service = PlaylistService()

# ============================================================================
# FILE: songbook/schemas/user.py
# ============================================================================
from pydantic import EmailStr
from typing import Optional, List
from songbook.schemas.playlist import CamelModel, PlaylistResponse

class UserCreate(CamelModel):
    """Schema for user registration"""
    username: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: EmailStr
    img_url: Optional[str] = None

class UserUpdate(CamelModel):
    """
    Schema for a partial profile update.
    The password only confirms the caller; it is never changed here.
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    img_url: Optional[str] = None
    password: Optional[str] = None
    
    class Config(CamelModel.Config):
        extra = "forbid"

class UserProfile(CamelModel):
    """Public user fields; the password hash is never included"""
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: str
    img_url: Optional[str] = None

class UserDetail(UserProfile):
    """Profile enriched with favorite song ids and owned playlists"""
    favorite_songs: List[str] = []
    playlists: List[PlaylistResponse] = []

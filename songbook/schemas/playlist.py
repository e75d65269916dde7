# ============================================================================
# FILE: songbook/schemas/playlist.py
# ============================================================================
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional, List

class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire"""
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

class PlaylistCreate(CamelModel):
    """Schema for creating a playlist"""
    name: str
    img_url: Optional[str] = None

class PlaylistUpdate(CamelModel):
    """Schema for renaming or re-imaging a playlist"""
    name: Optional[str] = None
    img_url: Optional[str] = None

class PlaylistResponse(CamelModel):
    """Schema for playlist response"""
    id: int
    name: str
    img_url: Optional[str] = None
    username: str

class PlaylistDetail(PlaylistResponse):
    """Playlist with the ordered song ids it contains"""
    tracks: List[str] = []

class PlaylistDeleted(CamelModel):
    deleted: int

class SongAdded(CamelModel):
    added: str

class SongDeleted(CamelModel):
    deleted: str

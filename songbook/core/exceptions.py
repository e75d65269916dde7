# ============================================================================
# FILE: songbook/core/exceptions.py
# ============================================================================
"""
Error kinds raised by the service layer.

Each error carries the HTTP status a caller should answer with, so a route
layer can translate them without knowing the individual subclasses.
"""


class SongbookError(Exception):
    """Base class for all songbook errors"""
    
    status_code = 500
    
    def __init__(self, message: str = "Internal error"):
        super().__init__(message)
        self.message = message
    
    def to_dict(self) -> dict:
        return {"error": {"message": self.message, "status": self.status_code}}


class NotFoundError(SongbookError):
    """Requested entity does not exist"""
    
    status_code = 404
    
    def __init__(self, message: str = "Not Found"):
        super().__init__(message)


class BadRequestError(SongbookError):
    """Request cannot be applied to the current state"""
    
    status_code = 400
    
    def __init__(self, message: str = "Bad Request"):
        super().__init__(message)


class DuplicateError(BadRequestError):
    """Entity already exists or a uniqueness rule would be violated"""


class InvalidInputError(BadRequestError):
    """Change set is empty or a required field is missing"""


class UnauthorizedError(SongbookError):
    """Credential check failed"""
    
    status_code = 401
    
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)

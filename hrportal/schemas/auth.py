from pydantic import BaseModel
from typing import Optional


class Token(BaseModel):
    """Schema for authentication token"""
    access_token: str
    token_type: str


class TokenPayload(BaseModel):
    """Schema for token payload"""
    sub: Optional[str] = None

from pydantic import Field
from enum import Enum
from typing import List, Optional

from app.schemas.loan_schema import CamelModel, UserProfile


class SessionState(CamelModel):
    """Client-owned browsing state; the server never stores it."""
    comparison_list: List[str] = Field(default_factory=list)
    saved_loans: List[str] = Field(default_factory=list)
    user_profile: Optional[UserProfile] = None

class ListActionEnum(str, Enum):
    add = "add"
    remove = "remove"
    clear = "clear"

class SessionActionRequest(CamelModel):
    state: SessionState = Field(default_factory=SessionState)
    action: ListActionEnum
    loan_id: Optional[str] = None

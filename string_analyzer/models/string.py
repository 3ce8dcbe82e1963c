from datetime import datetime
from typing import Dict

from pydantic import BaseModel, ConfigDict


class Properties(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    content_hash: str  # SHA-256, lowercase hex
    character_frequency: Dict[str, int]


class Entry(BaseModel):
    """A stored string, addressed by the hash of its content"""

    model_config = ConfigDict(frozen=True)

    id: str
    value: str
    properties: Properties
    created_at: datetime

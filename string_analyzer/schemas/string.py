from pydantic import BaseModel, Field, StrictStr
from typing import Any, Dict, List, Optional

from string_analyzer.models.string import Entry


class StringCreate(BaseModel):
    value: StrictStr = Field(..., description="String to analyze")


class StringProperties(BaseModel):
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringResponse(BaseModel):
    id: str
    value: str
    properties: StringProperties
    created_at: str

    @classmethod
    def from_entry(cls, entry: Entry) -> "StringResponse":
        props = entry.properties
        return cls(
            id=entry.id,
            value=entry.value,
            properties=StringProperties(
                length=props.length,
                is_palindrome=props.is_palindrome,
                unique_characters=props.unique_characters,
                word_count=props.word_count,
                sha256_hash=props.content_hash,
                character_frequency_map=props.character_frequency,
            ),
            # RFC 3339, millisecond precision, "Z" suffix
            created_at=entry.created_at.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        )


class StringListResponse(BaseModel):
    data: List[StringResponse]
    count: int
    filters_applied: Optional[Dict[str, Any]] = None


class InterpretedQueryResponse(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringResponse]
    count: int
    interpreted_query: InterpretedQueryResponse

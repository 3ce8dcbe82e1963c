import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from string_analyzer.errors import FilterValidationError
from string_analyzer.models.string import Entry

logger = logging.getLogger(__name__)


class StringFilters(BaseModel):
    """Structured filters, combined with AND when applied"""

    model_config = ConfigDict(frozen=True)

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def is_empty(self) -> bool:
        return not self.as_dict()

    def as_dict(self) -> Dict[str, Any]:
        """Only the filters that were actually supplied"""
        return self.model_dump(exclude_none=True)


def _parse_bool(name: str, raw: str) -> bool:
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise FilterValidationError(name, f"'{name}' must be 'true' or 'false'")


def _parse_count(name: str, raw: str) -> int:
    # int() alone would accept signs, surrounding spaces and underscores
    if not (raw.isascii() and raw.isdigit()):
        raise FilterValidationError(name, f"'{name}' must be a non-negative integer")
    return int(raw)


def _parse_character(name: str, raw: str) -> str:
    if len(raw) != 1:
        raise FilterValidationError(name, f"'{name}' must be a single character")
    return raw


def parse_filters(params: Mapping[str, Optional[str]]) -> StringFilters:
    """
    Build StringFilters from raw query-string values.

    Values are parsed strictly; anything that is not exactly the expected
    type raises FilterValidationError. Unknown parameters are ignored.
    """
    parsed: Dict[str, Any] = {}

    try:
        if params.get("is_palindrome") is not None:
            parsed["is_palindrome"] = _parse_bool("is_palindrome", params["is_palindrome"])

        for name in ("min_length", "max_length", "word_count"):
            if params.get(name) is not None:
                parsed[name] = _parse_count(name, params[name])

        if params.get("contains_character") is not None:
            parsed["contains_character"] = _parse_character(
                "contains_character", params["contains_character"]
            )
    except FilterValidationError as e:
        logger.info(f"Rejected filter {e.parameter}: {e.message}")
        raise

    return StringFilters(**parsed)


def matches(entry: Entry, filters: StringFilters) -> bool:
    """True if the entry satisfies every supplied filter"""
    props = entry.properties

    if filters.is_palindrome is not None and props.is_palindrome != filters.is_palindrome:
        return False

    if filters.min_length is not None and props.length < filters.min_length:
        return False

    if filters.max_length is not None and props.length > filters.max_length:
        return False

    if filters.word_count is not None and props.word_count != filters.word_count:
        return False

    if (
        filters.contains_character is not None
        and filters.contains_character not in props.character_frequency
    ):
        return False

    return True


def apply_filters(entries: Iterable[Entry], filters: Optional[StringFilters]) -> List[Entry]:
    """Keep only the entries matching all filters"""
    if filters is None or filters.is_empty():
        return list(entries)
    return [entry for entry in entries if matches(entry, filters)]

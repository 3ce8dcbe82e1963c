"""
Heuristic translation of a natural-language phrase into StringFilters.

This is a fixed set of phrase rules, not a parser. Each rule looks at the
normalized query on its own and contributes at most one filter value.

Examples:
- "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
- "strings longer than 10 characters" -> {min_length: 11}
- "strings containing the letter z" -> {contains_character: "z"}
- "non-palindromic strings" -> {is_palindrome: false}
"""
import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from string_analyzer.errors import ConflictingQueryError, UnparseableQueryError
from string_analyzer.services.filters import StringFilters

logger = logging.getLogger(__name__)

NEGATED_PALINDROME = "non-palindromic"
PALINDROME_PHRASES = ("palindromic", "palindrome")
SINGLE_WORD = "single word"
LONGER_THAN = "longer than"
CONTAINING_LETTER = "containing the letter"
FIRST_VOWEL = "contain the first vowel"
DEFAULT_VOWEL = "a"


class InterpretedQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    original: str
    parsed_filters: StringFilters


def normalize(text: str) -> str:
    return text.strip().lower()


def _asserts_palindrome(query: str) -> bool:
    # "non-palindromic" contains "palindromic", so the negated phrase is
    # removed before looking for a positive one
    remainder = query.replace(NEGATED_PALINDROME, " ")
    return any(phrase in remainder for phrase in PALINDROME_PHRASES)


def has_conflict(query: str) -> bool:
    """Both the negated and the positive palindrome phrase are present"""
    return NEGATED_PALINDROME in query and _asserts_palindrome(query)


def parse_palindrome(query: str) -> Optional[bool]:
    if NEGATED_PALINDROME in query:
        return False
    if _asserts_palindrome(query):
        return True
    return None


def parse_word_count(query: str) -> Optional[int]:
    if SINGLE_WORD in query:
        return 1
    return None


def parse_min_length(query: str) -> Optional[int]:
    """'longer than N' is strict, so the minimum length is N + 1"""
    pos = query.find(LONGER_THAN)
    if pos == -1:
        return None

    tokens = query[pos + len(LONGER_THAN):].split()
    if not tokens:
        return None

    token = tokens[0]
    if not (token.isascii() and token.isdigit()):
        return None
    return int(token) + 1


def parse_contains_character(query: str) -> Optional[str]:
    if FIRST_VOWEL in query:
        # Heuristic: always the first vowel of the alphabet, not of any string
        return DEFAULT_VOWEL

    pos = query.find(CONTAINING_LETTER)
    if pos == -1:
        return None

    rest = query[pos + len(CONTAINING_LETTER):].strip()
    if rest and rest[0].isalpha():
        return rest[0]
    return None


def interpret(text: str) -> InterpretedQuery:
    """
    Translate a natural-language query into structured filters.

    Raises:
        UnparseableQueryError: empty query or no rule matched
        ConflictingQueryError: palindrome and non-palindrome both requested
    """
    query = normalize(text)
    if not query:
        raise UnparseableQueryError()

    if has_conflict(query):
        logger.info(f"Conflicting natural language query: '{query}'")
        raise ConflictingQueryError()

    parsed: Dict[str, Any] = {
        "is_palindrome": parse_palindrome(query),
        "word_count": parse_word_count(query),
        "min_length": parse_min_length(query),
        "contains_character": parse_contains_character(query),
    }
    filters = StringFilters(**parsed)

    if filters.is_empty():
        logger.info(f"Unable to parse natural language query: '{query}'")
        raise UnparseableQueryError()

    logger.info(f"Interpreted '{query}' as {filters.as_dict()}")
    return InterpretedQuery(original=query, parsed_filters=filters)

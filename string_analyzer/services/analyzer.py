import hashlib
from collections import Counter
from typing import Dict

from string_analyzer.models.string import Properties


def is_encodable(text: str) -> bool:
    """False for text holding lone surrogates, which have no UTF-8 form"""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def is_palindrome(text: str) -> bool:
    """
    Check if string reads the same reversed, ignoring case only.
    Spaces and punctuation are part of the comparison.
    """
    lowered = text.lower()
    return lowered == lowered[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string (case-sensitive)"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count words separated by whitespace"""
    return len(text.split())


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))


def analyze(value: str) -> Properties:
    """Analyze a string and return all computed properties"""
    return Properties(
        length=len(value),
        is_palindrome=is_palindrome(value),
        unique_characters=count_unique_characters(value),
        word_count=count_words(value),
        content_hash=compute_sha256(value),
        character_frequency=get_character_frequency(value),
    )

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from typing import Optional
import logging

from string_analyzer.schemas.string import (
    InterpretedQueryResponse,
    NaturalLanguageResponse,
    StringCreate,
    StringListResponse,
    StringResponse,
)
from string_analyzer.services.filters import parse_filters
from string_analyzer.services.nl_query import interpret
from string_analyzer.store import StringStore

router = APIRouter()
logger = logging.getLogger(__name__)


def get_store(request: Request) -> StringStore:
    """Dependency to provide the application's store."""
    return request.app.state.store


@router.post("/strings", response_model=StringResponse, status_code=status.HTTP_201_CREATED)
def create_string(string_data: StringCreate, store: StringStore = Depends(get_store)):
    """
    Analyze and store a string.
    Returns 409 if the same content is already stored.
    """
    entry = store.create(string_data.value)
    return StringResponse.from_entry(entry)


@router.get("/strings", response_model=StringListResponse)
def get_all_strings(
    is_palindrome: Optional[str] = Query(None, description="true or false"),
    min_length: Optional[str] = Query(None, description="Minimum length (inclusive)"),
    max_length: Optional[str] = Query(None, description="Maximum length (inclusive)"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="A single character"),
    store: StringStore = Depends(get_store),
):
    """
    Get all strings, optionally narrowed by filters (combined with AND).
    """
    filters = parse_filters({
        "is_palindrome": is_palindrome,
        "min_length": min_length,
        "max_length": max_length,
        "word_count": word_count,
        "contains_character": contains_character,
    })

    entries = store.list_all(filters)
    data = [StringResponse.from_entry(e) for e in entries]
    filters_applied = filters.as_dict()

    return StringListResponse(
        data=data,
        count=len(data),
        filters_applied=filters_applied if filters_applied else None,
    )


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    store: StringStore = Depends(get_store),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if query is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing 'query' parameter",
        )

    interpreted = interpret(query)
    entries = store.list_all(interpreted.parsed_filters)
    data = [StringResponse.from_entry(e) for e in entries]

    return NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query=InterpretedQueryResponse(
            original=interpreted.original,
            parsed_filters=interpreted.parsed_filters.as_dict(),
        ),
    )


@router.get("/strings/{string_value}", response_model=StringResponse)
def get_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return StringResponse.from_entry(store.get_by_value(string_value))


@router.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    store.delete_by_value(string_value)
    return None

"""
Outcomes of the core operations that are reported back to the caller.

None of these indicate a defect. The application decides how each one is
presented (see ``ERROR_STATUS_CODES`` in ``string_analyzer.main``).
"""
from typing import Optional


class StringAnalyzerError(Exception):
    """Base class for every expected, recoverable outcome of the core"""

    message = "Bad request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class InvalidInputError(StringAnalyzerError):
    message = "Invalid request body or missing 'value' field"


class ConflictError(StringAnalyzerError):
    message = "String already exists in the system"


class NotFoundError(StringAnalyzerError):
    message = "String does not exist in the system"


class FilterValidationError(StringAnalyzerError):
    message = "Invalid query parameter values or types"

    def __init__(self, parameter: str, message: Optional[str] = None):
        self.parameter = parameter
        super().__init__(message)


class UnparseableQueryError(StringAnalyzerError):
    message = "Unable to parse natural language query"


class ConflictingQueryError(StringAnalyzerError):
    message = "Query parsed but resulted in conflicting filters"

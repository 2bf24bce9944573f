"""Domain-specific exceptions"""

from typing import Sequence


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class MissingRequiredFieldsError(DomainException):
    """Required applicant fields are absent, so no assessment can run"""

    def __init__(self, fields: Sequence[str]):
        self.fields = list(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")


class FieldOutOfRangeError(DomainException):
    """A form value is present but outside the range the engine accepts"""

    def __init__(self, field: str, value: float, limit: float):
        self.field = field
        self.value = value
        self.limit = limit
        super().__init__(f"{field}={value:g} exceeds the maximum of {limit:g}")

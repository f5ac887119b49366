"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidAdjustment(ValidationError):
    """A stock adjustment has a negative, non-integer or unknown value/mode."""


class InvalidDiscount(ValidationError):
    """A discount has a negative value or an unknown type."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotFound(EntityNotFoundError):
    """A referenced product id is absent from the catalog."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product with ID '{product_id}' not found")
        self.product_id = product_id

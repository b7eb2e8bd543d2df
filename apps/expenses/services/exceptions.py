"""
Domain-specific exceptions for expenses app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class ExpensesServiceError(Exception):
    """Base exception for all expense service errors."""
    pass


class ExpenseNotFoundError(ExpensesServiceError):
    """Raised when an expense does not exist."""
    pass


class NotExpenseOwnerError(ExpensesServiceError):
    """Raised when a user touches someone else's expense."""
    pass


class LinkedLogNotOwnedError(ExpensesServiceError):
    """Raised when linking an expense to a travel log the user does not own."""
    pass

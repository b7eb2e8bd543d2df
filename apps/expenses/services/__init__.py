"""
Expenses app services layer.
"""

from .exceptions import (
    ExpensesServiceError,
    ExpenseNotFoundError,
    NotExpenseOwnerError,
    LinkedLogNotOwnedError,
)

from .expense_management import (
    create_expense,
    list_user_expenses,
    get_expense,
    update_expense,
    delete_expense,
    get_expense_summary,
)


__all__ = [
    # Exceptions
    'ExpensesServiceError',
    'ExpenseNotFoundError',
    'NotExpenseOwnerError',
    'LinkedLogNotOwnedError',

    # Expense Management
    'create_expense',
    'list_user_expenses',
    'get_expense',
    'update_expense',
    'delete_expense',
    'get_expense_summary',
]

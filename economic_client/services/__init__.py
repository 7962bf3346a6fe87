"""
Services module for e-conomic entities.

Each service maps domain verbs onto remote web service operations.
"""

from .invoice_service import InvoiceService, INVOICE_OPTION_SETTERS
from .debtor_service import DebtorService
from .line_service import LineService

__all__ = [
    'InvoiceService',
    'INVOICE_OPTION_SETTERS',
    'DebtorService',
    'LineService',
]

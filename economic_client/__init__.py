"""
Client library for the e-conomic SOAP API (invoices, debtors, lines).

Example:
    from economic_client import EconomicSoapClient, InvoiceService

    with EconomicSoapClient() as client:
        invoices = InvoiceService(client)
        print(invoices.total(1001, vat=True))
"""

from .clients import EconomicSoapClient
from .services import InvoiceService, DebtorService, LineService

__version__ = '1.0.0'

__all__ = [
    'EconomicSoapClient',
    'InvoiceService',
    'DebtorService',
    'LineService',
]

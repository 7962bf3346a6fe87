"""
Line Service.

Reads invoice lines and, when bound to a current invoice, adds new lines
to it. InvoiceService.create hands a bound instance to the caller's callback.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional
from ..core.interfaces import AccountingClient
from ..core.logging_config import get_logger
from .handles import as_list, unwrap

logger = get_logger(__name__)

# Lower-cased line field -> CurrentInvoiceLine setter
LINE_FIELD_SETTERS: Dict[str, str] = {
    'description': 'CurrentInvoiceLine_SetDescription',
    'price': 'CurrentInvoiceLine_SetUnitNetPrice',
    'qty': 'CurrentInvoiceLine_SetQuantity',
    'quantity': 'CurrentInvoiceLine_SetQuantity',
    'discount': 'CurrentInvoiceLine_SetDiscountAsPercent',
}

# Fields whose value is a number that must be resolved to a handle first
LINE_HANDLE_FIELDS: Dict[str, tuple] = {
    'product': ('Product_FindByNumber', 'CurrentInvoiceLine_SetProduct'),
    'unit': ('Unit_FindByNumber', 'CurrentInvoiceLine_SetUnit'),
}


class LineService:
    """
    Service for invoice lines.
    
    Without an invoice handle the service only reads line data. With one,
    `add` creates lines on that current invoice.
    """
    
    def __init__(self, client: AccountingClient, invoice_handle: Optional[Any] = None):
        """
        Initialize line service.
        
        Args:
            client: Connected accounting client
            invoice_handle: Current invoice new lines are added to
        """
        self.client = client
        self.invoice_handle = invoice_handle
    
    def get_array_from_handles(self, handles: Any) -> List[Any]:
        """Get line data for one or more line handles."""
        result = self.client.call(
            'InvoiceLine_GetDataArray',
            entityHandles={'InvoiceLineHandle': as_list(handles)}
        )
        return as_list(unwrap(result, 'InvoiceLineData'))
    
    def add(self, data: Mapping[str, Any]) -> Any:
        """
        Add a line to the bound invoice.
        
        Recognized fields (case-insensitive): product, description, price,
        qty/quantity, unit, discount. Product and unit are numbers and are
        looked up before being set. Other fields are skipped with a warning.
        
        Args:
            data: Line fields
            
        Returns:
            Handle of the new line
            
        Raises:
            ValueError: If the service is not bound to an invoice
        """
        if self.invoice_handle is None:
            raise ValueError("LineService is not bound to an invoice")
        
        line_handle = self.client.call(
            'CurrentInvoiceLine_Create',
            invoiceHandle=self.invoice_handle
        )
        
        for field, value in data.items():
            name = str(field).lower()
            
            if name in LINE_HANDLE_FIELDS:
                lookup, setter = LINE_HANDLE_FIELDS[name]
                value = self.client.call(lookup, number=value)
            elif name in LINE_FIELD_SETTERS:
                setter = LINE_FIELD_SETTERS[name]
            else:
                logger.warning(f"Ignoring unknown line field: {field}")
                continue
            
            self.client.call(setter, currentInvoiceLineHandle=line_handle, value=value)
        
        logger.debug(f"Added line {line_handle} to invoice {self.invoice_handle}")
        return line_handle
    
    def add_many(self, rows: Iterable[Mapping[str, Any]]) -> List[Any]:
        """Add several lines, returning their handles in order."""
        return [self.add(row) for row in rows]

"""
Invoice Service.

Maps invoice operations onto the e-conomic Invoice and CurrentInvoice
web service methods.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional
from ..core.interfaces import AccountingClient, ResponseWriter
from ..core.exceptions import APIError, CreationError
from ..core.logging_config import get_logger
from .debtor_service import DebtorService
from .line_service import LineService
from .handles import as_list, get_field, has_field, unwrap

logger = get_logger(__name__)

# Lower-cased option name -> CurrentInvoice setter
INVOICE_OPTION_SETTERS: Dict[str, str] = {
    'vat': 'CurrentInvoice_SetIsVatIncluded',
    'text1': 'CurrentInvoice_SetTextLine1',
    'text2': 'CurrentInvoice_SetTextLine2',
    'heading': 'CurrentInvoice_SetHeading',
    'termsofdelivery': 'CurrentInvoice_SetTermsOfDelivery',
    'deliveryaddress': 'CurrentInvoice_SetDeliveryAddress',
    'deliverycity': 'CurrentInvoice_SetDeliveryCity',
    'deliverycountry': 'CurrentInvoice_SetDeliveryCountry',
    'deliverypostalcode': 'CurrentInvoice_SetDeliveryPostalCode',
    'otherreference': 'CurrentInvoice_SetOtherReference',
    'date': 'CurrentInvoice_SetDate',
    'layout': 'CurrentInvoice_SetLayout',
}


# Characters that would break out of a quoted header value
FILENAME_UNSAFE = {ord(char): None for char in '"\\\r\n'}


def pdf_filename(identifier: Any, handle: Any) -> str:
    """
    Download file name for an invoice PDF.
    
    Uses the invoice number from the handle when there is one, otherwise
    the identifier the caller passed (or the handle Id for a bare handle).
    """
    name = get_field(handle, 'Number')
    if name is None:
        name = get_field(handle, 'Id') if isinstance(identifier, Mapping) else identifier
    return f"{str(name).translate(FILENAME_UNSAFE)}.pdf"


class InvoiceService:
    """
    Service for invoices.
    
    Every method is one or a few remote round trips; nothing is cached.
    Identifiers may be an invoice number or an existing handle.
    """
    
    def __init__(
        self,
        client: AccountingClient,
        debtor_service: Optional[DebtorService] = None
    ):
        """
        Initialize invoice service.
        
        Args:
            client: Connected accounting client
            debtor_service: Optional debtor service (creates default if None)
        """
        self.client = client
        self.debtor_service = debtor_service or DebtorService(client)
    
    def get_handle(self, identifier: Any) -> Optional[Any]:
        """
        Resolve an invoice number to a handle.
        
        A handle with an Id is returned unchanged. Lookup failures are
        logged and reported as None.
        
        Args:
            identifier: Invoice number or handle
            
        Returns:
            Invoice handle, or None if not found
        """
        if has_field(identifier, 'Id'):
            return identifier
        
        try:
            handle = self.client.call('Invoice_FindByNumber', number=identifier)
        except APIError as e:
            logger.warning(f"Invoice lookup failed for {identifier}: {str(e)}")
            return None
        
        return handle or None
    
    def get_array_from_handles(self, handles: Any) -> List[Any]:
        """
        Get invoice data for one or more handles.
        
        Args:
            handles: A handle or a list of handles
            
        Returns:
            List of invoice data records
        """
        result = self.client.call(
            'CurrentInvoice_GetDataArray',
            entityHandles={'CurrentInvoiceHandle': as_list(handles)}
        )
        return as_list(unwrap(result, 'CurrentInvoiceData'))
    
    def all(self) -> List[Any]:
        """Get data for every current invoice."""
        handles = unwrap(self.client.call('CurrentInvoice_GetAll'), 'CurrentInvoiceHandle')
        return self.get_array_from_handles(handles)
    
    def get(self, identifier: Any) -> List[Any]:
        """Get invoice data by number, empty if the number is unknown."""
        handle = self.get_handle(identifier)
        if handle is None:
            return []
        
        return self.get_array_from_handles([handle])
    
    def due(self, identifier: Any) -> Any:
        """Get the invoice due date."""
        handle = self.get_handle(identifier)
        return self.client.call('Invoice_GetDueDate', invoiceHandle=handle)
    
    def total(self, identifier: Any, vat: bool = False) -> Any:
        """
        Get the invoice total.
        
        Args:
            identifier: Invoice number or handle
            vat: Gross amount (including VAT) if True, net amount otherwise
        """
        handle = self.get_handle(identifier)
        operation = 'Invoice_GetGrossAmount' if vat else 'Invoice_GetNetAmount'
        return self.client.call(operation, invoiceHandle=handle)
    
    def vat(self, identifier: Any) -> Any:
        """Get the invoice VAT amount."""
        handle = self.get_handle(identifier)
        return self.client.call('Invoice_GetVatAmount', invoiceHandle=handle)
    
    def lines(self, identifier: Any) -> List[Any]:
        """Get the line records of an invoice."""
        handle = self.get_handle(identifier)
        if handle is None:
            return []
        
        result = self.client.call('Invoice_GetLines', invoiceHandle=handle)
        line_handles = unwrap(result, 'InvoiceLineHandle')
        return LineService(self.client).get_array_from_handles(line_handles)
    
    def pdf(
        self,
        identifier: Any,
        download: bool = False,
        response: Optional[ResponseWriter] = None
    ) -> Any:
        """
        Get the invoice PDF.
        
        Args:
            identifier: Invoice number or handle
            download: Write the PDF to `response` as a file download
            response: HTTP response to write to when downloading
            
        Returns:
            PDF bytes, True after a download, None if the invoice is unknown
            
        Raises:
            ValueError: If download is requested without a response
        """
        if download and response is None:
            raise ValueError("A response is required to download the PDF")
        
        handle = self.get_handle(identifier)
        if handle is None:
            return None
        
        content = self.client.call('Invoice_GetPdf', invoiceHandle=handle)
        
        if download:
            response.set_header('Content-Type', 'application/pdf')
            response.set_header(
                'Content-Disposition',
                f'attachment; filename="{pdf_filename(identifier, handle)}"'
            )
            response.write(content)
            return True
        
        return content
    
    def create(
        self,
        debtor_number: Any,
        callback: Callable[[LineService], Any],
        options: Optional[Mapping[str, Any]] = None
    ) -> Any:
        """
        Create a new invoice for a debtor.
        
        The callback receives a LineService bound to the new invoice and is
        expected to add the invoice lines. It runs once, before the invoice
        data is fetched back.
        
        Args:
            debtor_number: Debtor number or handle
            callback: Function called with the line builder
            options: Optional invoice options (see set_options)
            
        Returns:
            Data record of the created invoice
            
        Raises:
            CreationError: If the service returns a handle without an Id
        """
        debtor_handle = self.debtor_service.get_handle(debtor_number)
        
        invoice_handle = self.client.call('CurrentInvoice_Create', debtorHandle=debtor_handle)
        
        if not has_field(invoice_handle, 'Id'):
            raise CreationError("Error: creating Invoice.", handle=invoice_handle)
        
        logger.info(f"Created invoice {get_field(invoice_handle, 'Id')} for debtor {debtor_number}")
        
        if options:
            self.set_options(invoice_handle, options)
        
        callback(LineService(self.client, invoice_handle))
        
        records = self.get_array_from_handles([invoice_handle])
        return records[0] if records else None
    
    def set_options(self, handle: Any, options: Mapping[str, Any]) -> None:
        """
        Apply invoice options.
        
        Option names are matched case-insensitively against
        INVOICE_OPTION_SETTERS. Unknown names are skipped with a warning.
        """
        for option, value in options.items():
            operation = INVOICE_OPTION_SETTERS.get(str(option).lower())
            if operation is None:
                logger.warning(f"Ignoring unknown invoice option: {option}")
                continue
            
            self.client.call(operation, currentInvoiceHandle=handle, value=value)
    
    def book(self, identifier: Any) -> Any:
        """
        Book a current invoice.
        
        Returns:
            The booked invoice number assigned by e-conomic
        """
        handle = self.get_handle(identifier)
        number = self.client.call('CurrentInvoice_Book', currentInvoiceHandle=handle)
        logger.info(f"Booked invoice {identifier} as {number}")
        return number

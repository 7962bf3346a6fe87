"""
Interface definitions using Python Protocols.

The services never talk to zeep directly. They depend on the AccountingClient
Protocol, so any object with a matching `call` method (the SOAP client, a test
double, a recorded fixture) can be injected.

Example usage:
    class FakeClient:
        def call(self, operation: str, **params: Any) -> Any:
            return {"Id": 1}
    
    client: AccountingClient = FakeClient()
    service = InvoiceService(client)
"""

from typing import Protocol, Any, runtime_checkable


@runtime_checkable
class AccountingClient(Protocol):
    """
    Protocol for the remote accounting API.
    
    Implementations own authentication, session handling and SOAP framing.
    
    Implementations:
    - EconomicSoapClient: zeep based client for the e-conomic web service
    """
    
    def call(self, operation: str, **params: Any) -> Any:
        """
        Invoke a named remote operation.
        
        Args:
            operation: Remote operation name (e.g. 'Invoice_FindByNumber')
            **params: Request fields of the operation
            
        Returns:
            The operation's result payload
            
        Raises:
            TransportError: On network failures
            RemoteFault: When the remote system rejects the request
        """
        ...


@runtime_checkable
class ResponseWriter(Protocol):
    """Protocol for the HTTP response a PDF download is written to."""
    
    def set_header(self, name: str, value: str) -> None:
        ...
    
    def write(self, data: bytes) -> Any:
        ...

"""
Debtor Service.

Resolves debtor numbers and reads debtor data.
"""

from typing import Any, List, Optional
from ..core.interfaces import AccountingClient
from ..core.exceptions import APIError
from ..core.logging_config import get_logger
from .handles import as_list, has_field, unwrap

logger = get_logger(__name__)


class DebtorService:
    """Service for debtors."""
    
    def __init__(self, client: AccountingClient):
        self.client = client
    
    def get_handle(self, identifier: Any) -> Optional[Any]:
        """
        Resolve a debtor number to a handle.
        
        Args:
            identifier: Debtor number or handle
            
        Returns:
            Debtor handle, or None if not found
        """
        if has_field(identifier, 'Number'):
            return identifier
        
        try:
            handle = self.client.call('Debtor_FindByNumber', number=identifier)
        except APIError as e:
            logger.warning(f"Debtor lookup failed for {identifier}: {str(e)}")
            return None
        
        return handle or None
    
    def get_array_from_handles(self, handles: Any) -> List[Any]:
        result = self.client.call(
            'Debtor_GetDataArray',
            entityHandles={'DebtorHandle': as_list(handles)}
        )
        return as_list(unwrap(result, 'DebtorData'))
    
    def all(self) -> List[Any]:
        handles = unwrap(self.client.call('Debtor_GetAll'), 'DebtorHandle')
        return self.get_array_from_handles(handles)
    
    def get(self, identifier: Any) -> List[Any]:
        handle = self.get_handle(identifier)
        if handle is None:
            return []
        
        return self.get_array_from_handles([handle])

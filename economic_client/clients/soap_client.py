"""
e-conomic SOAP Client Module

Handles the connection to the e-conomic web service and exposes every remote
operation through a single `call` method.
"""

from typing import Optional, Any
from requests import Session, RequestException
from zeep import Client
from zeep.transports import Transport
from zeep.exceptions import Error as ZeepError, Fault, TransportError as ZeepTransportError
from zeep.helpers import serialize_object
from ..core.logging_config import get_logger
from ..core.exceptions import APIError, ConfigurationError, RemoteFault, TransportError
from ..config.settings import Settings, get_settings

logger = get_logger(__name__)


class EconomicSoapClient:
    """
    Client for the e-conomic SOAP API.
    
    The web service keeps the login in a session cookie, so one
    requests.Session is shared by every call made through this client.
    """
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        soap_client: Optional[Any] = None,
        session: Optional[Session] = None
    ):
        """
        Initialize the client.
        
        The zeep client is created lazily on the first call, because loading
        the WSDL is a network round trip.
        
        Args:
            settings: Connection settings (global settings if None)
            soap_client: Optional preconfigured zeep Client
            session: Optional requests session for the transport
        """
        self.settings = settings or get_settings()
        self._owns_session = session is None
        self.session = session or Session()
        self._client = soap_client
        self.connected = False
    
    def _get_client(self) -> Client:
        """Create the zeep client on first use."""
        if self._client is None:
            logger.info(f"Loading WSDL from {self.settings.wsdl_url}")
            transport = Transport(
                session=self.session,
                timeout=self.settings.request_timeout,
                operation_timeout=self.settings.request_timeout
            )
            try:
                self._client = Client(self.settings.wsdl_url, transport=transport)
            except (ZeepError, RequestException) as e:
                raise TransportError(f"Could not load WSDL: {e}") from e
        return self._client
    
    def call(self, operation: str, **params: Any) -> Any:
        """
        Invoke a remote operation.
        
        Args:
            operation: Remote operation name (e.g. 'CurrentInvoice_Book')
            **params: Request fields of the operation
            
        Returns:
            The operation result converted to plain dicts and lists
            
        Raises:
            APIError: If the WSDL does not define the operation
            RemoteFault: If the service answers with a SOAP fault
            TransportError: On network failures or unusable responses
        """
        service = self._get_client().service
        try:
            method = getattr(service, operation)
        except AttributeError as e:
            raise APIError(f"Unknown operation: {operation}", operation=operation) from e
        
        logger.debug(f"Calling {operation}")
        try:
            result = method(**params)
        except Fault as e:
            logger.error(f"{operation} rejected: {e.message}")
            raise RemoteFault(
                e.message or f"{operation} failed",
                operation=operation,
                code=e.code,
                response=e.detail
            ) from e
        except (ZeepTransportError, RequestException) as e:
            logger.error(f"Transport error calling {operation}: {str(e)}")
            raise TransportError(str(e), operation=operation) from e
        except ZeepError as e:
            # Unparseable response or a request zeep cannot serialize
            logger.error(f"Protocol error calling {operation}: {str(e)}")
            raise TransportError(str(e), operation=operation) from e
        
        return serialize_object(result)
    
    def connect(self) -> Any:
        """
        Log in to the web service.
        
        Token login is used when a token pair is configured, otherwise the
        agreement number, user name and password are used.
        
        Returns:
            The remote login result
            
        Raises:
            ConfigurationError: If no complete set of credentials is configured
        """
        settings = self.settings
        
        if not settings.validate():
            raise ConfigurationError(
                "Missing e-conomic credentials. Please set ECONOMIC_TOKEN and "
                "ECONOMIC_APP_TOKEN, or ECONOMIC_AGREEMENT_NUMBER, "
                "ECONOMIC_USERNAME and ECONOMIC_PASSWORD in your .env file."
            )
        
        logger.debug(f"Connecting with settings: {settings.to_dict()}")
        
        if settings.uses_token_login:
            result = self.call(
                'ConnectWithToken',
                token=settings.token,
                appToken=settings.app_token
            )
        else:
            result = self.call(
                'Connect',
                agreementNumber=settings.agreement_number,
                userName=settings.username,
                password=settings.password
            )
        
        self.connected = True
        logger.info("Connected to e-conomic")
        return result
    
    def disconnect(self) -> None:
        """Log out, if logged in."""
        if not self.connected:
            return
        try:
            self.call('Disconnect')
        finally:
            self.connected = False
            logger.info("Disconnected from e-conomic")
    
    def __enter__(self) -> 'EconomicSoapClient':
        self.connect()
        return self
    
    def close(self) -> None:
        """Close the HTTP session, if this client created it."""
        if self._owns_session:
            self.session.close()
    
    def __exit__(self, exc_type, exc_value, traceback) -> None:
        try:
            self.disconnect()
        finally:
            self.close()

"""Client for the Clicksign electronic-signature API."""
from clicksign.client import Client
from clicksign.config import DEFAULT_HOST, SANDBOX_HOST, get_clicksign_config
from clicksign.errors import (
    BadRequest,
    ClicksignError,
    Forbidden,
    HTTPStatusError,
    MalformedInput,
    MalformedResponse,
    ServerError,
    ServiceUnavailable,
    TransportFailure,
    Unauthorized,
    UnexpectedStatus,
)
from clicksign.models import (
    Document,
    DocumentEvent,
    DocumentTemplate,
    EventData,
    Signer,
    SignerToDocument,
)

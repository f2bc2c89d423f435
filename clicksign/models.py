from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict


class ClicksignModel(BaseModel):
    """Base for Clicksign payloads: immutable, tolerant of new server fields."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_payload(self) -> dict:
        """JSON-ready dict without the fields the server has not filled."""
        return self.model_dump(mode="json", exclude_none=True)


class DocumentTemplate(ClicksignModel):
    """Template a document is generated from."""
    key: Optional[str] = None
    data: Dict[str, str] = {}  # placeholder name -> fill-in value


class EventData(ClicksignModel):
    """The "data" field of a document event."""
    user: Optional[Dict[str, str]] = None
    account: Optional[Dict[str, str]] = None
    deadline_at: Optional[str] = None
    auto_close: Optional[bool] = None
    locale: Optional[str] = None


class DocumentEvent(ClicksignModel):
    name: str
    data: EventData
    occurred_at: str


class Document(ClicksignModel):
    """Metainformation about a document stored in Clicksign."""
    key: Optional[str] = None
    path: str  # location inside the Clicksign virtual filesystem
    filename: Optional[str] = None
    updated_at: Optional[str] = None
    finished_at: Optional[str] = None
    deadline_at: Optional[str] = None
    status: Optional[str] = None
    auto_close: Optional[bool] = None
    locale: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None
    sequence_enabled: Optional[bool] = None
    signable_group: Optional[str] = None
    remind_interval: Optional[str] = None
    downloads: Optional[Dict[str, str]] = None
    template: DocumentTemplate
    signers: Optional[List[str]] = None
    events: Optional[List[DocumentEvent]] = None


class Signer(ClicksignModel):
    """A person required to sign a document."""
    email: str
    phone_number: str
    auths: List[str]  # e.g. "email", "sms", "whatsapp"
    name: str
    documentation: str  # CPF
    birthday: str
    has_documentation: bool
    delivery: str
    selfie_enabled: bool
    handwritten_enabled: bool
    official_document_enabled: bool
    liveness_enabled: bool

    # Set by Clicksign
    key: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class SignerToDocument(ClicksignModel):
    """A "list": links a signer to a document with a signing role."""
    document_key: str
    signer_key: str
    sign_as: str
    group: Optional[int] = None  # position in sequential signing
    message: str

    # Set by Clicksign
    key: Optional[str] = None
    request_signature_key: Optional[str] = None
    url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

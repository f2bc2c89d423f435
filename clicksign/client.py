import json
import logging
from typing import Any, Dict, Mapping, Optional, Union

import requests
from pydantic import TypeAdapter, ValidationError

from clicksign.config import DEFAULT_HOST
from clicksign.errors import MalformedInput, MalformedResponse, TransportFailure
from clicksign.handlers.response_handler import ResponseHandler
from clicksign.models import Signer, SignerToDocument

logger = logging.getLogger(__name__)

JSONBody = Union[str, bytes, Mapping[str, Any]]

SIGNERS_ADAPTER = TypeAdapter(Dict[str, Signer])
LISTS_ADAPTER = TypeAdapter(Dict[str, SignerToDocument])


class Client:
    """Clicksign API client.

    Authentication goes in the query string, so URLs built here contain the
    access token and must never be logged.
    """

    def __init__(self, access_token: str, host: Optional[str] = None,
                 session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        # host is concatenated as is; it must end with "/"
        self._host = host if host is not None else DEFAULT_HOST
        self._access_token = access_token
        self.session = session or requests.Session()
        self.timeout = timeout
        self.handler = ResponseHandler()

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "Client":
        """Build a client from get_clicksign_config()."""
        return cls(config["access_token"], host=config.get("host"), timeout=config.get("timeout"))

    @property
    def host(self) -> str:
        return self._host

    @property
    def access_token(self) -> str:
        return self._access_token

    def build_url(self, endpoint: str) -> str:
        return f"{self._host}{endpoint}?access_token={self._access_token}"

    def create_document_by_model(self, template_id: str, template_body: JSONBody) -> Any:
        """Create a document from a template.

        template_body is passed through untouched, since each template has its
        own placeholders. Returns the decoded JSON response.
        """
        payload = self._load_json(template_body)
        text = self._post(f"templates/{template_id}/documents", payload)
        return self._decode(text)

    def create_signer(self, request_body: Union[str, bytes, Mapping[str, Any]]) -> Dict[str, Signer]:
        """Create a signer, e.g. from {"signer": {...}}.

        The body is validated against Signer before anything is sent.
        """
        signers = self._validate(SIGNERS_ADAPTER, request_body)
        text = self._post("signers", {label: signer.to_payload() for label, signer in signers.items()})
        return self._parse(SIGNERS_ADAPTER, text)

    def add_signer_to_document(self, request_body: Union[str, bytes, Mapping[str, Any]]) -> Dict[str, SignerToDocument]:
        """Attach a signer to a document, e.g. from {"list": {...}}."""
        lists = self._validate(LISTS_ADAPTER, request_body)
        text = self._post("lists", {label: item.to_payload() for label, item in lists.items()})
        return self._parse(LISTS_ADAPTER, text)

    def request_signing_by_email(self, request_body: Union[str, bytes, Mapping[str, str]]) -> None:
        """Ask Clicksign to email the signer a signing request.

        Expects request_signature_key, message and url. The response body is
        discarded: returning means success.
        """
        payload = self._load_json(request_body)
        self._post("notifications", payload)

    send_notification_to_signer = request_signing_by_email

    def _post(self, endpoint: str, payload: Any) -> str:
        logger.debug(f"POST {endpoint}")

        try:
            response = self.session.post(
                self.build_url(endpoint),
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            # str(e) may echo the URL, token included
            logger.error(f"Request to {endpoint} failed: {e.__class__.__name__}")
            raise TransportFailure(f"Clicksign request to {endpoint} failed: {e.__class__.__name__}") from e

        return self.handler.handle(response)

    @staticmethod
    def _load_json(body: JSONBody) -> Any:
        if isinstance(body, (str, bytes, bytearray)):
            try:
                return json.loads(body)
            except ValueError as e:
                raise MalformedInput(f"Request body is not valid JSON: {e}") from e
        return body

    @staticmethod
    def _validate(adapter: TypeAdapter, body: JSONBody) -> Any:
        try:
            if isinstance(body, (str, bytes, bytearray)):
                return adapter.validate_json(body)
            return adapter.validate_python(body)
        except ValidationError as e:
            raise MalformedInput(f"Request body does not match the expected shape: {e}") from e

    @staticmethod
    def _decode(text: str) -> Any:
        try:
            return json.loads(text)
        except ValueError as e:
            raise MalformedResponse(f"Response body is not valid JSON: {e}") from e

    @staticmethod
    def _parse(adapter: TypeAdapter, text: str) -> Any:
        try:
            return adapter.validate_json(text)
        except ValidationError as e:
            raise MalformedResponse(f"Response body does not match the expected shape: {e}") from e

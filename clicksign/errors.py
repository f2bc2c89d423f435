from typing import Optional


class ClicksignError(Exception):
    """Base class for every failure raised by the client."""


class MalformedInput(ClicksignError):
    """Request body is not valid JSON or does not fit the expected model."""


class MalformedResponse(ClicksignError):
    """A successful response carried a body we could not decode."""


class TransportFailure(ClicksignError):
    """The HTTP call itself failed (connection, DNS, timeout...)."""


class HTTPStatusError(ClicksignError):
    status_code: Optional[int] = None

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class BadRequest(HTTPStatusError):
    status_code = 400

    def __init__(self, body: str):
        super().__init__(f"400 Bad Request: {body}")
        self.body = body


class Unauthorized(HTTPStatusError):
    status_code = 401

    def __init__(self):
        super().__init__("401 Unauthorized")


class Forbidden(HTTPStatusError):
    status_code = 403

    def __init__(self):
        super().__init__("403 Forbidden")


class ServerError(HTTPStatusError):
    status_code = 500

    def __init__(self):
        super().__init__("500 Internal Server Error")


class ServiceUnavailable(HTTPStatusError):
    status_code = 503

    def __init__(self):
        super().__init__("503 Service Unavailable")


class UnexpectedStatus(HTTPStatusError):
    def __init__(self, status_code: int):
        super().__init__(f"Received response: {status_code}", status_code)

from http import HTTPStatus
import logging

import requests

from clicksign.errors import (
    BadRequest,
    Forbidden,
    ServerError,
    ServiceUnavailable,
    Unauthorized,
    UnexpectedStatus,
)

logger = logging.getLogger(__name__)

SUCCESS_STATUSES = frozenset({HTTPStatus.OK, HTTPStatus.CREATED, HTTPStatus.ACCEPTED})


class ResponseHandler:
    """Maps a completed Clicksign response to its body or to an error."""

    def handle(self, response: requests.Response) -> str:
        """Return the raw body for 2xx responses, raise otherwise.

        Nothing is retried, 5xx included: recovery is up to the caller.
        """
        status = response.status_code

        if status in SUCCESS_STATUSES:
            return response.text

        logger.error(f"Clicksign responded with status {status}")

        if status == HTTPStatus.BAD_REQUEST:
            raise BadRequest(response.text)
        if status == HTTPStatus.UNAUTHORIZED:
            raise Unauthorized()
        if status == HTTPStatus.FORBIDDEN:
            raise Forbidden()
        if status == HTTPStatus.INTERNAL_SERVER_ERROR:
            raise ServerError()
        if status == HTTPStatus.SERVICE_UNAVAILABLE:
            raise ServiceUnavailable()
        raise UnexpectedStatus(status)

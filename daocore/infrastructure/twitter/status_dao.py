"""
Infrastructure adapter: status posts over the Twitter-style REST API → ICrdDao.

URI construction and response parsing are pure functions of their inputs, so
both can be exercised without a network. Every backend failure surfaces as one
of the daocore.domain.exceptions types.
"""

import logging
import math
from numbers import Real
from typing import Optional
from urllib.parse import quote

from daocore.domain.entities.status import Status
from daocore.domain.exceptions import (
    BackendRequestError,
    InvalidInputError,
    TransportError,
)
from daocore.domain.ports.codec_port import ICodec
from daocore.domain.ports.dao_port import ICrdDao
from daocore.domain.ports.http_port import HttpResponse, IHttpHelper

logger = logging.getLogger(__name__)

API_BASE_URI = "https://api.twitter.com"
POST_PATH = "/1.1/statuses/update.json"
SHOW_PATH = "/1.1/statuses/show.json"
DELETE_PATH = "/1.1/statuses/destroy/"

HTTP_OK = 200
MAX_TEXT_LENGTH = 280


def validate_status(status: Status) -> None:
    """Check a status is publishable.

    Raises:
        InvalidInputError: blank or over-long text, or a coordinate pair that
                           is not two in-range real numbers.
    """
    if not status.text or not status.text.strip():
        raise InvalidInputError("status text must be a non-empty string")
    if len(status.text) > MAX_TEXT_LENGTH:
        raise InvalidInputError(
            f"status text exceeds {MAX_TEXT_LENGTH} characters ({len(status.text)})"
        )
    if status.coordinates is None:
        return

    pair = status.coordinates.coordinates
    if pair is None or len(pair) != 2:
        raise InvalidInputError("coordinates must be a (longitude, latitude) pair")
    for value in pair:
        if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
            raise InvalidInputError(f"coordinate {value!r} is not a finite number")
    longitude, latitude = pair
    if not -180 <= longitude <= 180:
        raise InvalidInputError(f"longitude {longitude} is outside [-180, 180]")
    if not -90 <= latitude <= 90:
        raise InvalidInputError(f"latitude {latitude} is outside [-90, 90]")


def _validate_id(status_id: str) -> str:
    if status_id is None or not str(status_id).strip():
        raise InvalidInputError("status id must be a non-empty string")
    return quote(str(status_id).strip(), safe="")


def build_post_uri(status: Status, base_uri: str = API_BASE_URI) -> str:
    """Return `<base>/1.1/statuses/update.json?status=...[&long=...&lat=...]`."""
    validate_status(status)
    params = [("status", quote(status.text, safe=""))]
    if status.coordinates is not None:
        longitude, latitude = status.coordinates.coordinates
        params.append(("long", str(longitude)))
        params.append(("lat", str(latitude)))
    query = "&".join(f"{key}={value}" for key, value in params)
    return f"{base_uri}{POST_PATH}?{query}"


def build_show_uri(status_id: str, base_uri: str = API_BASE_URI) -> str:
    return f"{base_uri}{SHOW_PATH}?id={_validate_id(status_id)}"


def build_delete_uri(status_id: str, base_uri: str = API_BASE_URI) -> str:
    return f"{base_uri}{DELETE_PATH}{_validate_id(status_id)}.json"


def _body_for_log(response: HttpResponse) -> str:
    try:
        return response.body.decode(response.encoding, errors="replace")
    except LookupError:
        return response.body.decode("utf-8", errors="replace")


class StatusDao(ICrdDao[Status, str]):
    """Creates, looks up and deletes status posts through an IHttpHelper."""

    def __init__(
        self,
        http_helper: IHttpHelper,
        codec: ICodec,
        base_uri: Optional[str] = None,
    ) -> None:
        self._http_helper = http_helper
        self._codec = codec
        self._base_uri = (base_uri or API_BASE_URI).rstrip("/")

    def create(self, entity: Status) -> Status:
        uri = build_post_uri(entity, self._base_uri)
        response = self._http_helper.post(uri)
        return self.parse_response(response, HTTP_OK)

    def find_by_id(self, id: str) -> Status:
        uri = build_show_uri(id, self._base_uri)
        response = self._http_helper.get(uri)
        return self.parse_response(response, HTTP_OK)

    def delete_by_id(self, id: str) -> Status:
        # The API models deletion as a POST to a dedicated path.
        uri = build_delete_uri(id, self._base_uri)
        response = self._http_helper.post(uri)
        return self.parse_response(response, HTTP_OK)

    def parse_response(self, response: HttpResponse, expected_status: int) -> Status:
        """Validate *response* and decode its body into a Status.

        Raises:
            BackendRequestError: status differs from *expected_status*, or the
                                 body is empty. Decoding is never attempted.
            TransportError:      the body bytes cannot be read as text.
            CodecError:          the text does not decode into a Status.
        """
        status = response.status_code
        if status != expected_status:
            if response.has_body():
                logger.error("Unexpected HTTP status %s: %s", status, _body_for_log(response))
            else:
                logger.error("Unexpected HTTP status %s: response has no body", status)
            raise BackendRequestError(f"Unexpected HTTP status {status}", status_code=status)

        if not response.has_body():
            raise BackendRequestError("Empty response body", status_code=status)

        try:
            text = response.body.decode(response.encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise TransportError(f"Failed to read response body: {exc}") from exc

        return self._codec.decode(text, Status)

"""
HTTP uploader adapter - Implements ScriptUploader protocol.

This module posts scripts to the botvs rsync endpoint using httpx.

Wire format:
    POST <endpoint_url>
    Content-Type: application/x-www-form-urlencoded; charset=utf-8

    token=<token>&method=push&content=<payload>&version=<version>&client=<client>

The response body is returned as text whatever the HTTP status; the
domain decides success from the ``"code"`` it carries. Transport failures
become UploadTransportError. There is no retry.
"""

import logging
from urllib.parse import urlencode

import httpx

from src.config.settings import Settings
from src.domain.exceptions import UploadTransportError

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"
PUSH_METHOD = "push"


def _log_request(request: httpx.Request) -> None:
    # Body carries the token, only the request line is logged
    logger.debug("====== Request: %s %s =====", request.method, request.url)


def _log_response(response: httpx.Response) -> None:
    logger.debug(
        "====== Response: %s %s %s =====",
        response.request.method,
        response.request.url,
        response.status_code,
    )


def create_http_client(
    settings: Settings, transport: httpx.BaseTransport | None = None
) -> httpx.Client:
    """Create the shared httpx client with request/response debug logging."""
    return httpx.Client(
        timeout=settings.request_timeout,
        transport=transport,
        event_hooks={"request": [_log_request], "response": [_log_response]},
    )


def encode_push_form(token: str, payload: str, version: str, client: str) -> str:
    """
    Build the form-encoded push body.

    Field order is fixed. Values are UTF-8 percent-encoded with spaces as '+'.
    """
    return urlencode(
        [
            ("token", token),
            ("method", PUSH_METHOD),
            ("content", payload),
            ("version", version),
            ("client", client),
        ],
        encoding="utf-8",
    )


class HttpScriptUploader:
    """
    Implements ScriptUploader protocol via httpx.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The httpx client is owned by the caller and may be shared.
    """

    def __init__(
        self,
        client: httpx.Client,
        endpoint_url: str,
        version: str,
        client_name: str,
    ) -> None:
        """
        Initialize uploader.

        Args:
            client: httpx client used for the request
            endpoint_url: botvs rsync URL
            version: Protocol version sent as the ``version`` field
            client_name: Identifying string sent as the ``client`` field
        """
        self._client = client
        self._endpoint_url = endpoint_url
        self._version = version
        self._client_name = client_name

    @classmethod
    def from_settings(cls, client: httpx.Client, settings: Settings) -> "HttpScriptUploader":
        """Create an uploader configured from application settings."""
        return cls(
            client=client,
            endpoint_url=settings.endpoint_url,
            version=settings.protocol_version,
            client_name=settings.client_name,
        )

    def push(self, token: str, payload: str) -> str:
        """
        POST the payload to the endpoint and return the response body.

        Args:
            token: 32-character botvs token
            payload: Script content

        Returns:
            Response body decoded as text

        Raises:
            UploadTransportError: On invalid URL, connect, timeout or protocol failures
        """
        body = encode_push_form(token, payload, self._version, self._client_name)
        try:
            response = self._client.post(
                self._endpoint_url,
                content=body.encode("utf-8"),
                headers={"Content-Type": FORM_CONTENT_TYPE},
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise UploadTransportError(str(exc) or type(exc).__name__) from exc

        return response.text

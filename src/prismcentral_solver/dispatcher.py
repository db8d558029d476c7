"""HTTP delivery of trigger payloads to the webhook endpoint."""

import base64

import httpx

from prismcentral_solver._logging import Timer, get_challenge_extra, get_logger
from prismcentral_solver.exceptions import TransportError, UnexpectedStatusError

logger = get_logger(__name__)


def basic_auth_header(username: str, password: str) -> str:
    """Build an HTTP Basic Authorization header value.

    Args:
        username: The user name (may contain ':').
        password: The password.

    Returns:
        "Basic " followed by base64(username:password).
    """
    encoded = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
    return f"Basic {encoded}"


class RequestDispatcher:
    """Sends trigger payloads with a single POST per call.

    Args:
        timeout: HTTP request timeout in seconds (default: 30).
    """

    def __init__(self, timeout: float = 30):
        self.timeout = timeout

    def send(self, data: bytes, url: str, username: str, password: str) -> None:
        """POST a JSON body to the webhook endpoint.

        Only HTTP 200 counts as success. No retries are made.

        Args:
            data: Serialized JSON request body.
            url: The webhook endpoint URL.
            username: Basic-Auth user name.
            password: Basic-Auth password.

        Raises:
            TransportError: If the endpoint cannot be reached.
            UnexpectedStatusError: If the endpoint answers with a non-200 status.
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": basic_auth_header(username, password),
        }

        try:
            with httpx.Client(timeout=self.timeout) as client, Timer() as t:
                response = client.post(url, content=data, headers=headers)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error(
                "Error sending request",
                extra={"url": url, "error": str(e), **get_challenge_extra()},
            )
            raise TransportError("error sending request", e) from e

        logger.debug(
            "Webhook endpoint responded",
            extra={
                "url": url,
                "status_code": response.status_code,
                "elapsed_ms": t.elapsed_ms,
                **get_challenge_extra(),
            },
        )

        if response.status_code != httpx.codes.OK:
            logger.error(
                "Webhook endpoint returned unexpected status",
                extra={"url": url, "status_code": response.status_code, **get_challenge_extra()},
            )
            raise UnexpectedStatusError(response.status_code)

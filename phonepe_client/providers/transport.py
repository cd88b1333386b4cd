import logging
from typing import Any, Dict, Optional

import requests

from phonepe_client.config import DEFAULTS
from phonepe_client.errors import GatewayError
from phonepe_client.models import GatewayRequest

logger = logging.getLogger(__name__)


class HttpTransport:
    """
    Sends assembled GatewayRequests over HTTP.

    Returns the decoded JSON body on 2xx responses. Anything else raises
    GatewayError; nothing is retried.
    """

    def __init__(self, timeout: Optional[int] = None, session: Optional[requests.Session] = None):
        self.timeout = timeout or DEFAULTS['timeout']
        self._session = session or requests.Session()

    def send(self, request: GatewayRequest) -> Dict[str, Any]:
        try:
            resp = self._session.request(
                request.method,
                request.url,
                headers={"Accept": "application/json", **request.headers},
                json=request.body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("PhonePe %s %s failed: %s", request.method, request.url, exc)
            raise GatewayError("NETWORK_ERROR", str(exc)) from exc

        return self._handle_response(resp, request)

    def close(self):
        self._session.close()

    def _handle_response(self, resp: requests.Response, request: GatewayRequest) -> Dict[str, Any]:
        """
        Parse a PhonePe HTTP response, raising on errors.

        PhonePe error bodies look like:
            {"success": false, "code": "BAD_REQUEST", "message": "...", "data": {}}
        """
        try:
            data = resp.json()
        except ValueError:
            data = None

        logger.debug("PhonePe [%s %s] HTTP %s: %s", request.method, request.url, resp.status_code, data)

        if 200 <= resp.status_code < 300:
            if data is None:
                raise GatewayError(
                    "INVALID_RESPONSE",
                    f"non-JSON response body (HTTP {resp.status_code})",
                    http_status=resp.status_code,
                    response=resp.text,
                )
            return data

        if isinstance(data, dict):
            code = data.get("code") or f"HTTP_{resp.status_code}"
            message = data.get("message") or resp.reason or ""
        else:
            code = f"HTTP_{resp.status_code}"
            message = (resp.text or resp.reason or "")[:300]

        logger.warning(
            "Request failed with status %s. Refer https://developer.phonepe.com/v1/reference",
            code,
        )
        raise GatewayError(code, message, http_status=resp.status_code, response=data)

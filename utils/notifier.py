# utils/notifier.py
import logging
from typing import Any, Dict, Optional

import requests

log = logging.getLogger(__name__)


class WebhookError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


def post_webhook(url: str, files: Dict[str, Any]) -> requests.Response:
    """
    Single multipart POST to `url`. No retry: any transport error or a
    non-2xx answer raises WebhookError (with the response body as detail).
    """
    try:
        r = requests.post(url, files=files)
    except requests.RequestException as e:
        raise WebhookError(f"Failed to send report: {e}") from e

    if not 200 <= r.status_code < 300:
        raise WebhookError(f"Failed to send report: {r.text}", status_code=r.status_code, body=r.text)

    log.info("Webhook accepted report (HTTP %d)", r.status_code)
    return r

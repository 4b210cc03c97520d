# report_sender.py
import json
import logging
from typing import Any, Dict

import requests

from arg_parser import Invocation
from process_runner import ExecutionResult
from utils.notifier import post_webhook

log = logging.getLogger(__name__)

STDOUT_FILENAME = "stdout.txt"
STDERR_FILENAME = "stderr.txt"


def format_summary(invocation: Invocation, result: ExecutionResult) -> str:
    cmdline = f"{invocation.command} {' '.join(invocation.command_args)}"
    return (
        f"`{cmdline}` took `{result.duration_seconds:.2f}s` "
        f"to execute with exit code `{result.exit_code}`"
    )


def build_payload(invocation: Invocation, result: ExecutionResult) -> Dict[str, Any]:
    """
    Message body in the Discord-style webhook shape: uploaded files must be
    declared under `attachments` with ids matching the `files[n]` parts.
    """
    return {
        "username": invocation.job_name,
        "content": format_summary(invocation, result),
        "attachments": [
            {"id": 0, "filename": STDOUT_FILENAME},
            {"id": 1, "filename": STDERR_FILENAME},
        ],
    }


def build_form(invocation: Invocation, result: ExecutionResult) -> Dict[str, Any]:
    # (filename, body, content type) tuples for requests' `files=`; both
    # attachments go out even when empty
    payload = build_payload(invocation, result)
    log.debug("Report payload: %s", payload["content"])
    return {
        "payload_json": (None, json.dumps(payload), "application/json"),
        "files[0]": (STDOUT_FILENAME, result.stdout_text, "text/plain"),
        "files[1]": (STDERR_FILENAME, result.stderr_text, "text/plain"),
    }


def send_report(invocation: Invocation, result: ExecutionResult) -> requests.Response:
    return post_webhook(invocation.webhook_url, build_form(invocation, result))

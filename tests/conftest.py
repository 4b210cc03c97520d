from email.parser import BytesParser
from email.policy import default

import pytest
import requests


class FakeResponse:
    def __init__(self, status_code=204, text=""):
        self.status_code = status_code
        self.text = text


@pytest.fixture
def webhook_calls(monkeypatch):
    """Replaces requests.post; the recorded calls are returned, use `.reply()` to change the answer."""

    class Recorder(list):
        response = FakeResponse()

        def reply(self, status_code, text=""):
            self.response = FakeResponse(status_code, text)

    calls = Recorder()

    def fake_post(url, **kwargs):
        calls.append((url, kwargs))
        return calls.response

    monkeypatch.setattr(requests, "post", fake_post)
    return calls


@pytest.fixture
def multipart_parts():
    """Encode a `files=` dict the way requests does and split it back into parts by field name."""

    def parse(files):
        prepared = requests.Request("POST", "http://hook.invalid/", files=files).prepare()
        raw = b"Content-Type: " + prepared.headers["Content-Type"].encode() + b"\r\n\r\n" + prepared.body
        msg = BytesParser(policy=default).parsebytes(raw)
        return {p.get_param("name", header="content-disposition"): p for p in msg.iter_parts()}

    return parse

import os

import httpx
import pytest

from oauth2_linkedin import LinkedInProvider


class RecordingTransport(httpx.MockTransport):
    """Mock transport answering with queued responses and recording requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []
        super().__init__(self._handle)

    def queue(self, *responses):
        self.responses.extend(responses)

    def _handle(self, request):
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        return self.responses.pop(0)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    """Keep the developer's LinkedIn settings out of the tests."""
    for key in list(os.environ):
        if key.startswith(("LINKEDIN_", "OAUTH2_")):
            monkeypatch.delenv(key)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def provider(transport):
    return LinkedInProvider.from_options(
        client_id="mock_client_id",
        client_secret="mock_secret",
        redirect_uri="none",
        transport=transport,
    )

"""Shared fixtures.

Settings are always built explicitly and the environment is scrubbed, so a
developer's own EBAYR_* variables or .env files never leak into a test.
"""

from __future__ import annotations

import pytest

from ebayr.core.config import EbayrSettings
from ebayr.core.domain.models import RawResponse

SUCCESS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<GetItemResponse xmlns="urn:ebay:apis:eBLBaseComponents">
  <Timestamp>2024-01-02T03:04:05.000Z</Timestamp>
  <Ack>Success</Ack>
  <Version>1235</Version>
  <Item>
    <ItemID>110012345678</ItemID>
    <Title>Widget</Title>
    <StartPrice currencyID="USD">9.99</StartPrice>
    <PictureDetails>
      <PictureURL>https://example.com/a.jpg</PictureURL>
      <PictureURL>https://example.com/b.jpg</PictureURL>
    </PictureDetails>
    <Description></Description>
  </Item>
</GetItemResponse>
"""

FAILURE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<GetItemResponse xmlns="urn:ebay:apis:eBLBaseComponents">
  <Ack>Failure</Ack>
  <Errors>
    <ShortMessage>Item not found.</ShortMessage>
    <LongMessage>The item 42 could not be found.</LongMessage>
    <ErrorCode>17</ErrorCode>
    <SeverityCode>Error</SeverityCode>
    <ErrorClassification>RequestError</ErrorClassification>
  </Errors>
  <Errors>
    <ShortMessage>Deprecated.</ShortMessage>
    <LongMessage>This version is deprecated.</LongMessage>
    <ErrorCode>21917053</ErrorCode>
    <SeverityCode>Warning</SeverityCode>
  </Errors>
</GetItemResponse>
"""

WARNING_XML = """<?xml version="1.0" encoding="UTF-8"?>
<GeteBayOfficialTimeResponse xmlns="urn:ebay:apis:eBLBaseComponents">
  <Timestamp>2024-01-02T03:04:05.000Z</Timestamp>
  <Ack>Warning</Ack>
  <Errors>
    <ShortMessage>Deprecated.</ShortMessage>
    <LongMessage>This version is deprecated.</LongMessage>
    <ErrorCode>21917053</ErrorCode>
    <SeverityCode>Warning</SeverityCode>
  </Errors>
</GeteBayOfficialTimeResponse>
"""


class StubTransport:
    """`Transport` double that records calls and returns a canned answer."""

    def __init__(self, body: str = "", status_code: int = 200, exc: Exception | None = None) -> None:
        self.body = body
        self.status_code = status_code
        self.exc = exc
        self.calls: list[dict] = []

    def post(self, url, *, headers, content, timeout):
        self.calls.append({"url": url, "headers": headers, "content": content, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return RawResponse(status_code=self.status_code, headers={"Content-Type": "text/xml"}, body=self.body)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    import os

    for name in list(os.environ):
        if name.upper().startswith("EBAYR_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> EbayrSettings:
    return EbayrSettings(
        _env_file=None,
        dev_id="dev-id",
        app_id="app-id",
        cert_id="cert-id",
        ru_name="My-RuName",
        auth_token="token-123",
    )


@pytest.fixture
def stub_transport() -> StubTransport:
    return StubTransport(body=SUCCESS_XML)

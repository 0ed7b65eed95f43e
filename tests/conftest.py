"""
Shared fixtures: an app wired to a stub LLM provider and an isolated upload directory.
"""
import os
from typing import Callable, List, Optional

import fitz  # pymupdf
import pytest
from fastapi.testclient import TestClient

from resume_ace.core.config import Settings
from resume_ace.llm.provider import LLMProvider, LLMResponse
from resume_ace.main import create_app


class StubProvider(LLMProvider):
    """Deterministic provider that records every prompt it receives."""
    name = "stub"

    def __init__(self, content: str = "", error: Optional[Exception] = None, on_call: Optional[Callable] = None):
        self.content = content
        self.error = error
        self.on_call = on_call
        self.calls: List[dict] = []

    async def generate(self, prompt, model, temperature=0.7, max_tokens=None, json_mode=True):
        self.calls.append({"prompt": prompt, "model": model, "temperature": temperature})
        if self.on_call:
            self.on_call(prompt)
        if self.error:
            raise self.error
        return LLMResponse(content=self.content, tokens_in=10, tokens_out=20, model=model)


def make_pdf(text: str = "") -> bytes:
    """Build a one-page PDF, optionally with text on it."""
    doc = fitz.open()
    page = doc.new_page()
    if text:
        page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def upload_dir(tmp_path):
    return str(tmp_path / "uploads")


@pytest.fixture
def settings(upload_dir):
    return Settings(api_key="test-key-123", upload_dir=upload_dir)


@pytest.fixture
def provider():
    return StubProvider()


@pytest.fixture
def client(settings, provider):
    app = create_app(settings, provider=provider)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def resume_pdf():
    return make_pdf("Jane Doe\nSenior Python Engineer\nFastAPI, PostgreSQL, AWS")


def stored_files(upload_dir: str) -> List[str]:
    if not os.path.isdir(upload_dir):
        return []
    return os.listdir(upload_dir)

import os
import sys
import random

import pytest

# Backend modules live flat in backend/, as in main.py
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

from fastapi.testclient import TestClient

from app import create_app
from config import Settings
from database import DatabaseService


SAMPLE_TEXT = (
    "KnowledgeScout is a document analysis tool. "
    "The upload process accepts PDF, DOCX and plain text files. "
    "Extracted text is stored alongside each document record. "
    "Questions are answered by matching keywords against sentences!"
)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        data_file=str(tmp_path / "data.pkl"),
        upload_dir=str(tmp_path / "uploads"),
        max_upload_size=1024,
    )


@pytest.fixture
def database(settings):
    return DatabaseService(settings.data_file)


@pytest.fixture
def client(settings, database):
    app = create_app(settings, database=database, rng=random.Random(7))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def processed_document(client):
    """Upload and process a text document, returning its id"""
    response = client.post(
        "/api/upload",
        files={"document": ("notes.txt", SAMPLE_TEXT.encode("utf-8"), "text/plain")},
    )
    assert response.status_code == 200
    doc_id = response.json()["document"]["id"]

    response = client.post(f"/api/process/{doc_id}")
    assert response.status_code == 200
    return doc_id

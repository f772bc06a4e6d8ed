"""HTTP tests for the upload, extract and parse endpoints."""

from io import BytesIO

import pytest
from docx import Document
from fastapi.testclient import TestClient

from cv_enhancer.api.dependencies import get_upload_store
from cv_enhancer.core.upload_store import LocalUploadStore
from cv_enhancer.main import app

client = TestClient(app)

RESUME_TXT = b"""Jane Doe
jane.doe@example.com | (555) 123-4567

Experience
Senior Developer
Acme Corp
Jan 2020 - Present
Led a team of five engineers.

Skills
Python, FastAPI, PostgreSQL
"""

DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@pytest.fixture
def store(tmp_path):
    upload_store = LocalUploadStore(str(tmp_path), max_bytes=1024)
    app.dependency_overrides[get_upload_store] = lambda: upload_store
    yield upload_store
    app.dependency_overrides.clear()


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_parse_txt():
    files = {"file": ("resume.txt", RESUME_TXT, "text/plain")}
    r = client.post("/api/parse", files=files)
    assert r.status_code == 200
    data = r.json()

    assert data["source"] == "text"
    assert data["resume"]["personalInfo"]["email"] == "jane.doe@example.com"
    assert data["resume"]["skills"] == ["Python", "FastAPI", "PostgreSQL"]
    exp = data["resume"]["experience"][0]
    assert exp["company"] == "Acme Corp"
    assert exp["startDate"] == "2020-01"
    assert exp["isCurrent"] is True
    assert data["sections"] == ["experience", "skills"]


def test_parse_docx_keeps_blank_paragraphs_between_entries():
    doc = Document()
    for para in [
        "Jane Doe",
        "jane.doe@example.com",
        "Experience",
        "Senior Developer",
        "Acme Corp",
        "Jan 2020 - Present",
        "",
        "Software Engineer",
        "Globex",
        "2015 - 2019",
    ]:
        doc.add_paragraph(para)
    buf = BytesIO()
    doc.save(buf)

    files = {"file": ("resume.docx", buf.getvalue(), DOCX_TYPE)}
    r = client.post("/api/parse", files=files)
    assert r.status_code == 200
    data = r.json()

    assert data["source"] == "docx"
    assert data["resume"]["personalInfo"]["fullName"] == "Jane Doe"
    assert [e["company"] for e in data["resume"]["experience"]] == ["Acme Corp", "Globex"]


def test_parse_empty_file():
    files = {"file": ("resume.txt", b"", "text/plain")}
    r = client.post("/api/parse", files=files)
    assert r.status_code == 400


def test_parse_unsupported_type():
    files = {"file": ("photo.png", b"\x89PNG\r\n\x1a\n", "image/png")}
    r = client.post("/api/parse", files=files)
    assert r.status_code == 415


def test_parse_corrupt_pdf():
    files = {"file": ("resume.pdf", b"definitely not a pdf", "application/pdf")}
    r = client.post("/api/parse", files=files)
    assert r.status_code == 422


def test_parse_text_endpoint():
    r = client.post("/api/parse/text", json={"text": RESUME_TXT.decode()})
    assert r.status_code == 200
    data = r.json()
    assert data["source"] == "text"
    assert data["resume"]["personalInfo"]["fullName"] == "Jane Doe"
    assert data["parseQuality"] in {"high", "medium", "low"}


def test_parse_text_requires_text():
    r = client.post("/api/parse/text", json={})
    assert r.status_code == 422


class TestUploadAndExtract:
    def test_upload_pdf(self, store):
        files = {"cv": ("resume.pdf", b"%PDF-1.4 fake", "application/pdf")}
        r = client.post("/api/upload", files=files)
        assert r.status_code == 200
        data = r.json()
        assert data["success"] is True
        assert data["message"] == "File uploaded successfully"
        assert store.load(data["fileId"]) == b"%PDF-1.4 fake"

    def test_upload_rejects_non_pdf(self, store):
        files = {"cv": ("resume.docx", b"PK\x03\x04", DOCX_TYPE)}
        r = client.post("/api/upload", files=files)
        assert r.status_code == 415
        assert r.json()["detail"] == "Only PDF files are allowed!"

    def test_upload_too_large(self, store):
        files = {"cv": ("resume.pdf", b"x" * 2048, "application/pdf")}
        r = client.post("/api/upload", files=files)
        assert r.status_code == 413

    def test_extract_unknown_id(self, store):
        r = client.get(f"/api/extract/{'0' * 32}")
        assert r.status_code == 404

    def test_extract_parses_uploaded_pdf(self, store, monkeypatch):
        monkeypatch.setattr(
            "cv_enhancer.api.routes.upload.extract_pdf_text",
            lambda raw: RESUME_TXT.decode(),
        )
        file_id = store.save(b"%PDF-1.4 fake", "resume.pdf")

        r = client.get(f"/api/extract/{file_id}")
        assert r.status_code == 200
        data = r.json()
        assert data["source"] == "pdf"
        assert data["resume"]["experience"][0]["title"] == "Senior Developer"

    def test_extract_unreadable_pdf(self, store):
        file_id = store.save(b"%PDF-1.4 fake", "resume.pdf")
        r = client.get(f"/api/extract/{file_id}")
        assert r.status_code == 422

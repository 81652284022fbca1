# tests/test_loader.py
import asyncio
import base64
import hashlib
import logging
from pathlib import Path

import pytest
import requests

from html_inline.errors import FetchFailure, IntegrityMismatch, ReadFailure
from html_inline.loader import ResourceLoader, compute_integrity

URL = "https://cdn.example.com/lib.js"
BODY = b"console.log('remote');"


def _digest(data):
    return "sha384-" + base64.b64encode(hashlib.sha384(data).digest()).decode()


def test_compute_integrity_matches_sri_format():
    assert compute_integrity(BODY) == _digest(BODY)


def test_local_locators_resolve_against_source_directory(site):
    loader = ResourceLoader(Path("site"))
    assert loader.resolve_local("js/app.js") == site / "js" / "app.js"
    # Root-relative locators stay inside the source directory.
    assert loader.resolve_local("/js/app.js") == site / "js" / "app.js"


def test_read_text_and_bytes(site):
    (site / "note.txt").write_text("héllo", encoding="utf-8")
    loader = ResourceLoader(Path("site"))
    assert asyncio.run(loader.read_text("note.txt")) == "héllo"
    assert asyncio.run(loader.read_bytes("note.txt")) == "héllo".encode("utf-8")


def test_missing_local_file_raises_read_failure(site):
    loader = ResourceLoader(Path("site"))
    with pytest.raises(ReadFailure) as excinfo:
        asyncio.run(loader.read_text("missing.js"))
    assert excinfo.value.path == site / "missing.js"


def test_fetch_without_integrity(site, fake_session):
    fake_session.add(URL, BODY)
    loader = ResourceLoader(Path("site"), session=fake_session, timeout=5.0)
    assert asyncio.run(loader.fetch_text(URL)) == BODY.decode()
    assert fake_session.requested == [(URL, 5.0)]


def test_fetch_verifies_integrity_and_logs(site, fake_session, caplog):
    fake_session.add(URL, BODY)
    loader = ResourceLoader(Path("site"), session=fake_session)
    with caplog.at_level(logging.INFO, logger="html_inline"):
        assert asyncio.run(loader.fetch_bytes(URL, _digest(BODY))) == BODY
    assert f"verified {_digest(BODY)} : {URL}" in caplog.messages


def test_fetch_integrity_mismatch_names_both_digests(site, fake_session):
    fake_session.add(URL, BODY)
    loader = ResourceLoader(Path("site"), session=fake_session)
    declared = _digest(b"something else")
    with pytest.raises(IntegrityMismatch) as excinfo:
        asyncio.run(loader.fetch_text(URL, declared))
    message = str(excinfo.value)
    assert declared in message
    assert _digest(BODY) in message


def test_integrity_comparison_is_case_sensitive(site, fake_session):
    fake_session.add(URL, BODY)
    loader = ResourceLoader(Path("site"), session=fake_session)
    declared = "SHA384-" + _digest(BODY)[len("sha384-"):]
    with pytest.raises(IntegrityMismatch):
        asyncio.run(loader.fetch_text(URL, declared))


def test_fetch_non_success_status_carries_status_text(site, fake_session):
    fake_session.add(URL, status_code=503, reason="Service Unavailable")
    loader = ResourceLoader(Path("site"), session=fake_session)
    with pytest.raises(FetchFailure) as excinfo:
        asyncio.run(loader.fetch_text(URL))
    assert excinfo.value.status == 503
    assert "Service Unavailable" in str(excinfo.value)


def test_transport_error_becomes_fetch_failure(site, fake_session):
    fake_session.fail(URL, requests.ConnectionError("connection refused"))
    loader = ResourceLoader(Path("site"), session=fake_session)
    with pytest.raises(FetchFailure) as excinfo:
        asyncio.run(loader.fetch_text(URL))
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)

# tests/conftest.py
"""
Shared fixtures. The app is pointed at an in-memory SQLite database before
any linkbuilder module is imported.
"""
import os
from datetime import date

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_TO_FILE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-the-link-builder-suite")

import pytest
from fastapi.testclient import TestClient

from linkbuilder.db.base import Base
from linkbuilder.db.session import engine, SessionLocal
from linkbuilder.main import app


@pytest.fixture(autouse=True)
def reset_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def valid_draft():
    """A complete draft that passes every rule"""
    return {
        "baseUrl": "https://example.com",
        "campaignType": "Display Ads",
        "campaignSource": "Google",
        "adType": "Banner",
        "adTypeDetail": "Standard Banner",
        "brand1": "Brand A",
        "productCategory": "Hardware",
        "campaignOwner": "Daniel Konig",
        "startDate": date(2026, 10, 1).isoformat(),
        "campaignNotes": "launch",
        "projectReferenceNumber": "1234567",
        "industry": "Technology",
        "tactic": "Awareness",
        "targeting": False,
        "partnering": False,
        "thirdParty": False,
    }

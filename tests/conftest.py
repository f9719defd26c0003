"""Shared fixtures for the roster tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from shift_roster.domain.models import Base


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "integration: end-to-end CLI runs against a file database (deselect with '-m \"not integration\"')"
    )


@pytest.fixture
def db_session():
    """In-memory roster store with all tables created."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine)()
    yield session
    session.close()
    engine.dispose()

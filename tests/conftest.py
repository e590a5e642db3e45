import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from corecontracts.core.database.models import Base


@pytest.fixture
def db_session():
    """Create in-memory database for testing"""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()
    engine.dispose()

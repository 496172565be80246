"""Core test fixtures for npcforge tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from npcforge.data.names import NameAllocator
from npcforge.database.models.base import Base
from npcforge.sampling import SeededRandom
from npcforge.services.npc_generator import GenerationPipeline
from npcforge.world.population import PopulationDirectory
from tests.factories import FakeClock, FakeTextService


@pytest.fixture(scope="session")
def engine():
    """Create SQLite in-memory engine for fast tests."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
    )

    # Import models so they're registered with Base
    from npcforge.database.models import save_slot  # noqa: F401

    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture(scope="function")
def db_session(engine) -> Session:
    """Create a fresh database session for each test.

    Uses a transaction that rolls back after each test for isolation.
    """
    connection = engine.connect()
    transaction = connection.begin()
    session_factory = sessionmaker(bind=connection)
    session = session_factory()

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture
def clock() -> FakeClock:
    """Controllable clock starting at a fixed instant."""
    return FakeClock()


@pytest.fixture
def rng() -> SeededRandom:
    return SeededRandom(12345)


@pytest.fixture
def allocator() -> NameAllocator:
    return NameAllocator()


@pytest.fixture
def pipeline(allocator: NameAllocator, rng: SeededRandom, clock: FakeClock) -> GenerationPipeline:
    return GenerationPipeline(names=allocator, rng=rng, clock=clock)


@pytest.fixture
def directory(pipeline: GenerationPipeline) -> PopulationDirectory:
    """Empty directory with the default cap of 50."""
    return PopulationDirectory(pipeline)


@pytest.fixture
def text_service() -> FakeTextService:
    return FakeTextService()

import pytest

from stockguard.application.add_variant import AddVariantHandler
from stockguard.infrastructure.config import Settings
from stockguard.infrastructure.database import create_db_engine, create_session_factory
from stockguard.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(database_url=f"sqlite:///{tmp_path / 'stockguard.db'}", sqlite_timeout=30.0)


@pytest.fixture
def engine(settings):
    engine = create_db_engine(settings)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def make_uow(session_factory):
    """Return a factory so each thread can own its unit of work."""
    return lambda: SqlAlchemyUnitOfWork(session_factory)


@pytest.fixture
def tee(make_uow) -> int:
    dto = AddVariantHandler(make_uow()).handle(
        product_id=1, sku="TEE-BLK-M", color="Black", size="M", price="15.00",
        initial_stock=10, reorder_point=2,
    )
    return dto.id


@pytest.fixture
def jeans(make_uow) -> int:
    dto = AddVariantHandler(make_uow()).handle(
        product_id=2, sku="JEANS-32", color="Blue", size="32", price="40.00",
        initial_stock=5,
    )
    return dto.id

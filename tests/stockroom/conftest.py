import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def stockroom_bed():
    from stockroom.domain import stockroom

    bed = DomainFixture(stockroom)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(stockroom_bed):
    with stockroom_bed.domain_context():
        yield

import os

import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def inventory_bed(request):
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from inventory.domain import inventory
    from inventory.utils.logging import configure_logging

    configure_logging(level="WARNING")

    bed = DomainFixture(inventory)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(inventory_bed):
    with inventory_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()

        for _, broker in current_domain.brokers.items():
            broker._data_reset()

        current_domain.event_store.store._data_reset()

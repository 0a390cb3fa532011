import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def notifier_bed():
    from notifier.domain import notifier

    bed = DomainFixture(notifier)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(notifier_bed):
    with notifier_bed.domain_context():
        yield
        for _, provider in current_domain.providers.items():
            provider._data_reset()


@pytest.fixture(autouse=True)
def _reset_adapters():
    from notifier.alertrecord import reset_alert_store
    from notifier.channel import reset_channels
    from notifier.config import reset_settings
    from notifier.notification.delivery import reset_delivery_sink
    from notifier.resource.loader import reset_entity_loader
    from notifier.subscription.source import reset_subscription_source

    resets = [
        reset_alert_store,
        reset_channels,
        reset_settings,
        reset_delivery_sink,
        reset_entity_loader,
        reset_subscription_source,
    ]
    for reset in resets:
        reset()
    yield
    for reset in resets:
        reset()

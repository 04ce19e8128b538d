import pytest

from careernet.network.types import ConnectionEdge, Contact


@pytest.fixture
def user_contacts() -> list[Contact]:
    return [
        Contact(id="1", name="Alice Johnson", company="TechCorp", role="Engineer"),
        Contact(id="2", name="Bob Smith", company="DataInc", role="PM"),
        Contact(id="3", name="Charlie Davis", company="CloudSys", role="Designer"),
    ]


@pytest.fixture
def connections() -> list[ConnectionEdge]:
    return [
        ConnectionEdge("1", "4", "colleague"),
        ConnectionEdge("2", "5", "former_colleague"),
        ConnectionEdge("4", "6", "friend"),
        ConnectionEdge("5", "7", "mentor"),
    ]


@pytest.fixture
def people() -> list[Contact]:
    return [
        Contact(id="4", name="Diana Wilson", company="InnovateAI", role="CTO"),
        Contact(id="6", name="Frank Miller", company="StartupX", role="CEO"),
    ]

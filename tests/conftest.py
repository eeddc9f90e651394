import pytest

from controllers.csv_controller import CSVController, MemoryClipboard
from models.csv_model import Table
from services.settings_service import MemorySettingsStore


class FakeNotifier:
    def __init__(self):
        self.messages = []

    def notify(self, kind, message):
        self.messages.append((kind, message))

    def kinds(self):
        return [k for k, _ in self.messages]


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def clipboard():
    return MemoryClipboard()


@pytest.fixture
def store():
    return MemorySettingsStore()


@pytest.fixture
def controller(notifier, clipboard, store):
    return CSVController(notifier=notifier, clipboard=clipboard, settings_store=store)


@pytest.fixture
def people():
    return Table([
        ["name", "city", "amount"],
        ["Alice Smith", "New York", "$1,200.00"],
        ["Bob Jones", "Boston", "$35.50"],
        ["Carol Smith", "new haven", "$900"],
        ["Dave", "York", "10"],
    ])

import os
import sys
import pytest
from PyQt6.QtCore import QCoreApplication

from fakes import FixedArrangements, InMemoryStore
from utils.constants import APPLICATION_NAME, ORGANIZATION_NAME


@pytest.fixture(scope="session", autouse=True)
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication(sys.argv)
    app.setOrganizationName(ORGANIZATION_NAME)
    app.setApplicationName(APPLICATION_NAME)
    return app


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def arrangements():
    return FixedArrangements(count=3)

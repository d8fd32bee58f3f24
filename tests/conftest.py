"""
Shared fixtures for the grid tests.
"""
import pytest
from PySide6.QtCore import QCoreApplication

from pigment.engine import EngineSettings
from pigment.session import GridSession


@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    """Signals are delivered synchronously, but Qt still wants an app object."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def session():
    return GridSession(settings=EngineSettings())

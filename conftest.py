import pytest

from libcatalog import Catalog, Library, Membership
from libcatalog.utils.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # The CLI stores the output mode in the environment; reset it for every test
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")


@pytest.fixture
def lib():
    # A fresh, isolated library for each test
    return Library()


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
def membership():
    return Membership()


@pytest.fixture
def dune_lib(lib):
    """Library holding one book (Dune, ISBN1) and one student, Alice (ID 1)."""
    lib.add_book("Dune", "Herbert", "ISBN1")
    lib.register_user("Alice", "Student")
    return lib

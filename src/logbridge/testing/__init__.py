"""Testing support – fakes and fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["logbridge.testing.fixtures"]
"""

from logbridge.testing.fakes import FakeClock, InMemorySink

__all__ = ["FakeClock", "InMemorySink"]

import os

import pytest


@pytest.fixture(autouse=True)
def _restore_environ():
	"""Restore os.environ after each test (load_dotenv writes to it directly)."""
	saved = dict(os.environ)
	yield
	os.environ.clear()
	os.environ.update(saved)

from __future__ import annotations

import pytest

from record_search import search_records


@pytest.fixture(scope="session")
def records_to_13000():
    return list(search_records(stop=13000))

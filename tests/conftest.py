import os
import sys

import matplotlib
import pytest

matplotlib.use("Agg")

_parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _parent_dir not in sys.path:
    sys.path.insert(0, _parent_dir)

from news_scoring import Document  # noqa: E402


@pytest.fixture
def lexicon():
    return {"run": "run", "runs": "run", "jumped": "jump"}


@pytest.fixture
def corpus():
    return [
        Document("2020-01-02", "A", "run runs"),
        Document("2020-01-01", "B", "jumped jumped"),
    ]

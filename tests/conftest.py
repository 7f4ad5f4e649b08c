from __future__ import annotations

import pytest

from fakes import FakeEnvironment


@pytest.fixture
def fake_environment() -> FakeEnvironment:
    return FakeEnvironment(
        {
            "app.js": [
                {"source": "app-ab12cd3.js", "generated": (1, 0), "original": (1, 0)},
                {"source": "lib.js", "generated": (1, 12), "original": (4, 2)},
                {"source": "app-ab12cd3.js", "generated": (2, 0), "original": (2, 0)},
            ],
            "lib.js": None,
            "site.css": [{"source": "site-0123456789abcdef.css", "generated": (1, 0)}],
        }
    )

"""Shared test fixtures for git-dig."""

import os
from datetime import datetime, timezone

import pytest

from git_dig.history import parse_raw_log

# Seven commits, newest first: Alice 5, Bob 2.
# src/app.js is touched 6 times (churn 71) by both authors,
# config.json twice by Alice only.
RAW_LOG = """---GIT-DIG-SEP---
abc1234
Alice
2026-02-10T10:00:00+09:00
Add feature X
5\t2\tsrc/app.js
10\t0\tsrc/utils.js
---GIT-DIG-SEP---
def5678
Bob
2026-02-09T14:00:00+09:00
Fix bug in app
3\t1\tsrc/app.js
1\t1\tREADME.md
---GIT-DIG-SEP---
ghi9012
Alice
2026-02-08T09:00:00+09:00
Refactor utils
0\t5\tsrc/utils.js
15\t0\tsrc/utils.js
2\t0\tsrc/app.js
---GIT-DIG-SEP---
jkl3456
Alice
2026-02-07T08:00:00+09:00
Initial commit
50\t0\tsrc/app.js
30\t0\tsrc/utils.js
10\t0\tREADME.md
---GIT-DIG-SEP---
mno7890
Bob
2026-02-06T16:00:00+09:00
Add tests
20\t0\tsrc/app.test.js
5\t2\tsrc/app.js
---GIT-DIG-SEP---
pqr1234
Alice
2026-02-05T12:00:00+09:00
Config update
3\t1\tconfig.json
---GIT-DIG-SEP---
stu5678
Alice
2026-02-04T11:00:00+09:00
More config
2\t1\tconfig.json
1\t0\tsrc/app.js
"""

# Ten days after the newest fixture commit
FIXED_NOW = datetime(2026, 2, 20, tzinfo=timezone.utc)


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def raw_log():
    """Raw git log text for the seven-commit history."""
    return RAW_LOG


@pytest.fixture
def commits():
    """Parsed seven-commit history, newest first."""
    return parse_raw_log(RAW_LOG)


@pytest.fixture
def now():
    """Fixed reference time for code-age computations."""
    return FIXED_NOW


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Keep config discovery away from the real home and working directory."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("GIT_DIG_"):
            monkeypatch.delenv(key)
    return work

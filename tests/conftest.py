from __future__ import annotations

import sys
from collections.abc import Iterator

import pytest

from findkit.utils.logging import init_loggers


@pytest.fixture(autouse=True)
def _reset_log_handles() -> Iterator[None]:
    yield
    init_loggers(None, sys.__stdout__, sys.__stdout__, sys.__stdout__, sys.__stderr__)

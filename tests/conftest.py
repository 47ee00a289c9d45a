from __future__ import annotations

from typing import Iterable

import pytest

from sptconv.format import build_header


def make_spt(width: int, height: int, body: Iterable[int] = (), compressed: bool = False) -> bytes:
    return build_header(width, height, compressed) + bytes(body)


@pytest.fixture
def spt_factory():
    return make_spt

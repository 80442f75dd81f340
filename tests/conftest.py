from __future__ import annotations

import io
from collections.abc import Callable

import pytest

from microlist.compiler import compile
from microlist.core.vm import VM


def run_source(src: str, **kwargs) -> str:
    out = io.StringIO()
    vm = VM(out=out, **kwargs)
    vm.load_program(compile(src))
    vm.execute()
    return out.getvalue()


@pytest.fixture()
def run() -> Callable[..., str]:
    return run_source

import io

import pytest

from btui.canvas import Canvas
from btui.fixed import FixedCanvas


@pytest.fixture
def canvas():
    return Canvas()


@pytest.fixture
def fixed():
    return FixedCanvas(10, 8)


@pytest.fixture
def stream():
    return io.StringIO()

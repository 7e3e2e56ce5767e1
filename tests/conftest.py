import os

import pytest

# Qt widgets are exercised headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from telegraph.detents import DETENTS
from telegraph.layout import StaticDimensionProvider

# px per detent in catalog order: Flank, Full, Std, 2/3, 1/3, Stop
SAMPLE_HEIGHTS = [28, 25, 20, 18, 10, 14]


@pytest.fixture
def sample_provider():
    return StaticDimensionProvider(
        {d.height_token: h for d, h in zip(DETENTS, SAMPLE_HEIGHTS)}
    )


@pytest.fixture(scope="session")
def qapp():
    QtWidgets = pytest.importorskip("PyQt5.QtWidgets")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app

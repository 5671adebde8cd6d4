from __future__ import annotations

import pytest

from homepage_tui.datamodels import Author

from factories import make_posts


@pytest.fixture
def author():
    return Author(name="syamil maulod", avatar="/static/images/avatar.png")


@pytest.fixture
def seven_posts():
    return make_posts(7)

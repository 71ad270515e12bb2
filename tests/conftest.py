from __future__ import annotations

import pytest
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blinkshare.db import DatabaseContext, create_engine_from_settings
from blinkshare.models import Base
from blinkshare.stores import Stores


@pytest.fixture()
def engine():
    engine = create_engine_from_settings(url="sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture()
def ctx(engine):
    return DatabaseContext.from_engine(engine)


@pytest.fixture()
def stores(ctx):
    return Stores.from_context(ctx)

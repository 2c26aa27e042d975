import os
import sys

import pytest
from flask import Flask

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from cavegen.cave import Area  # noqa: E402

OVERRIDE_ENV_KEYS = ("CAVE_ENABLE_GENERATION_METRICS", "CAVE_SMOOTH_AMOUNT", "CAVE_PASSAGE_RADIUS")


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep host env overrides out of generation and silence info logs."""
    for key in OVERRIDE_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("CAVEGEN_LOG_LEVEL", "warn")
    monkeypatch.delenv("CAVEGEN_LOG_JSON", raising=False)
    yield


@pytest.fixture()
def flask_app():
    app = Flask("cavegen-tests")
    app.config.update({"TESTING": True})
    return app


@pytest.fixture()
def closed_area():
    """Root area with no neighbours on any side."""
    return Area(identity="closed")

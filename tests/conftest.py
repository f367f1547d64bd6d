import os
import sys

import pytest


# Ensure repository src directory (and the root scripts) are on sys.path for tests
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC = os.path.join(ROOT, "src")
for path in (ROOT, SRC):
    if path not in sys.path:
        sys.path.insert(0, path)


from ballot_box import RecordingEmitter, VotingSystem  # noqa: E402


OWNER = "owner"


@pytest.fixture
def recorder():
    return RecordingEmitter()


@pytest.fixture
def box(recorder):
    return VotingSystem(OWNER, emitter=recorder)

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Ensure project root is importable (so `import hellosvc` / `import main` work reliably across environments)
_project_root = os.path.dirname(os.path.dirname(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)


@pytest.fixture
def client():
    from hellosvc.app import app

    with TestClient(app) as c:
        yield c

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

_SANDBOX = tempfile.mkdtemp(prefix="allium-tests-")
for _name in ("XDG_DATA_HOME", "XDG_CACHE_HOME"):
    os.environ[_name] = os.path.join(_SANDBOX, _name.lower())
# seeded sample notes would break empty-collection assertions
os.environ.pop("ALLIUM_DEV_PROFILE", None)

"""Root conftest: make src/poststudio_mcp importable without an install.

An editable install from another checkout would otherwise shadow this
tree, so src/ goes first on sys.path.
"""

import pathlib
import sys

_src = str(pathlib.Path(__file__).resolve().parent / "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

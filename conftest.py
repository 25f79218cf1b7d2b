"""Configure pytest.

Puts ``src/`` on the import path so the suite runs from a plain checkout, and
the project root so tests can import shared helpers as ``tests.helpers``.
"""

import os
import sys
from pathlib import Path

root_dir = Path(__file__).parent
src_path = str(root_dir / "src")

for path in (src_path, str(root_dir)):
    if path not in sys.path:
        sys.path.insert(0, path)

os.environ["PYTHONPATH"] = src_path

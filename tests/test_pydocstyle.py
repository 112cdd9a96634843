import subprocess
import sys

import pytest

pytestmark = pytest.mark.quality


def test_pydocstyle_conformance():
    """Ensure docstring conventions are respected."""
    cmd = [sys.executable, "-m", "pydocstyle", "ectype"]
    result = subprocess.run(cmd, capture_output=True, text=True)
    assert result.returncode == 0, result.stdout + result.stderr

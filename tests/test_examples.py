"""Smoke tests for the example scripts.

These tests verify that examples run without errors.
They don't verify correctness of results, just that the code executes.
"""

import subprocess
import sys
from pathlib import Path

EXAMPLES_DIR = Path(__file__).parent.parent / "lander" / "examples"


def run_example(example_name: str, timeout: int = 300) -> subprocess.CompletedProcess:
    """Run an example script and return the result."""
    script_path = EXAMPLES_DIR / f"{example_name}.py"

    result = subprocess.run(
        [sys.executable, str(script_path)],
        capture_output=True,
        text=True,
        timeout=timeout,
        cwd=Path(__file__).parent.parent,  # Run from project root
    )

    return result


class TestExamplesSmoke:
    """Smoke tests that verify examples run without crashing."""

    def test_descent_autopilot_runs(self) -> None:
        """Test that descent_autopilot.py runs without errors."""
        result = run_example("descent_autopilot")
        assert result.returncode == 0, f"descent_autopilot failed:\n{result.stderr}"
        assert "Touchdown speed" in result.stdout

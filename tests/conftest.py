"""Shared pytest fixtures for julietscript tests."""

from pathlib import Path

import pytest

VALID_SCRIPT = '''\
juliet {
  engine = codex;
}

policy failureTriage = """
Recover workers and summarize repeated failures.
""";

policy sprintPreFlight = """
Open tasks for gaps before sprinting.
""";

rubric qualityCheck {
  criterion "Meets all specs" points 4 means "Implements the requested behavior.";
  criterion "Tests green" points 2 means "All relevant tests pass.";
  tiebreakers ["Meets all specs"];
}

cadence threeVariantsShootout {
  engine = codex;
  variants = 3;
  sprints = 2;
  compare using qualityCheck;
  keep best 2;
}

create MyNewArtifact from juliet """
<prompt here>
""" with {
  preflight = sprintPreFlight;
  failureTriage = failureTriage;
  cadence = threeVariantsShootout;
  rubric = qualityCheck;
};

extend MyNewArtifact.rubric with """
Add visual coverage checks.
""";

halt "Human review checkpoint.";
'''


@pytest.fixture
def valid_script() -> str:
    """Return a script that uses every statement and lints cleanly."""
    return VALID_SCRIPT


@pytest.fixture
def write_script(tmp_path: Path):
    """Return a helper that writes a script under tmp_path and returns its path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write

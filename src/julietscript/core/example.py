"""
Annotated example script.

Printed by ``julietscript example`` as a starting point for new workflows.
It uses every statement kind and lints without diagnostics.
"""

EXAMPLE_SCRIPT = '''\
# JulietScript example: a reviewed patch-series workflow.
# Lines starting with '#' are comments.

# Global defaults. A file should contain at most one juliet block.
juliet {
  engine = codex;
}

# Policies are named blocks of reusable instruction text.
policy PreflightChecklist = """
Read the brief, list open questions and confirm the test command
before writing any code.
""";

policy FailureTriage = "Record the root cause, then retry once.";

# A rubric scores variants. Points must be positive.
rubric PatchRubric {
  criterion "Correctness" points 5 means "All tests pass.";
  criterion "Readability" points 3 means """Small, focused diffs.""";
  criterion "Safety" points 2;
  tiebreakers ["Correctness", "Safety"];
}

# A cadence branches into variants, runs sprints, then prunes.
# 'variants' and 'sprints' are required.
cadence PatchLoop {
  engine = "codex";
  variants = 3;
  sprints = 2;
  compare using PatchRubric;
  keep best 1;
}

# Artifacts can be seeded from files on disk...
create ProjectBrief from julietArtifactSourceFiles [
  "docs/brief.md",
  "docs/architecture.md"
];

# ...or produced from a prompt, using earlier artifacts as input.
create PatchSeries from juliet "Produce a reviewed patch series for the brief."
using [ProjectBrief]
with {
  preflight = PreflightChecklist;
  failureTriage = FailureTriage;
  cadence = PatchLoop;
  rubric = PatchRubric;
};

# Add a criterion to an existing artifact's rubric.
extend PatchSeries.rubric with "Penalize changes to public APIs.";

halt "Stop once PatchSeries has been accepted.";
'''

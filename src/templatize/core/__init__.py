"""Core materialization exports."""

from templatize.core.git import GitClient
from templatize.core.materialize import (
    MaterializeResult,
    MaterializeState,
    PhaseFailure,
    PhaseResult,
    ProjectMaterializer,
)
from templatize.core.substitution import SubstitutionResult, apply_substitutions
from templatize.core.tables import DEFAULT_REPO_URL, build_template_config
from templatize.core.walker import collect_tree, is_skipped, substitute_file

__all__ = [
    "DEFAULT_REPO_URL",
    "GitClient",
    "MaterializeResult",
    "MaterializeState",
    "PhaseFailure",
    "PhaseResult",
    "ProjectMaterializer",
    "SubstitutionResult",
    "apply_substitutions",
    "build_template_config",
    "collect_tree",
    "is_skipped",
    "substitute_file",
]

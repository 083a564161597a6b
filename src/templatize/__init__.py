"""Public API surface for templatize."""

__version__ = "0.1.0"

from templatize.contracts.config import (
    ProjectOptions,
    Replacement,
    SubstitutionTable,
    TemplateConfig,
    TemplatePass,
)
from templatize.contracts.exceptions import (
    CloneError,
    ConfigError,
    FileProcessingError,
    InvalidTransitionError,
    MissingStructureError,
    TargetExistsError,
    TemplatizeError,
)
from templatize.contracts.progress import MaterializeProgress, NullMaterializeProgress
from templatize.core import (
    DEFAULT_REPO_URL,
    GitClient,
    MaterializeResult,
    MaterializeState,
    PhaseFailure,
    PhaseResult,
    ProjectMaterializer,
    SubstitutionResult,
    apply_substitutions,
    build_template_config,
    collect_tree,
    substitute_file,
)

__all__ = [
    "DEFAULT_REPO_URL",
    "CloneError",
    "ConfigError",
    "FileProcessingError",
    "GitClient",
    "InvalidTransitionError",
    "MaterializeProgress",
    "MaterializeResult",
    "MaterializeState",
    "MissingStructureError",
    "NullMaterializeProgress",
    "PhaseFailure",
    "PhaseResult",
    "ProjectMaterializer",
    "ProjectOptions",
    "Replacement",
    "SubstitutionResult",
    "SubstitutionTable",
    "TargetExistsError",
    "TemplateConfig",
    "TemplatePass",
    "TemplatizeError",
    "__version__",
    "apply_substitutions",
    "build_template_config",
    "collect_tree",
    "substitute_file",
]

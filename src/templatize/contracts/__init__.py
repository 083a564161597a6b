"""Public contracts: configuration models, exceptions and progress protocol."""

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

__all__ = [
    "CloneError",
    "ConfigError",
    "FileProcessingError",
    "InvalidTransitionError",
    "MaterializeProgress",
    "MissingStructureError",
    "NullMaterializeProgress",
    "ProjectOptions",
    "Replacement",
    "SubstitutionTable",
    "TargetExistsError",
    "TemplateConfig",
    "TemplatePass",
    "TemplatizeError",
]

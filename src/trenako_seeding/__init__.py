from .config import CommandOptions
from .dataset import (
    Dataset,
    DatasetPathNotFoundError,
    InvalidConfigurationError,
    ResourceReadError,
    Resource,
    ResourceType,
    ResourceTypeNotFoundError,
    SeedingError,
)
from .logging_utils import logger, setup_rich_logging
from .seeding import run
from .validator import ValidationIssue, Validated, Validators, validate_dataset
from .version import __version__

__all__ = [
    "CommandOptions",
    "Dataset",
    "Resource",
    "ResourceType",
    "SeedingError",
    "DatasetPathNotFoundError",
    "ResourceTypeNotFoundError",
    "ResourceReadError",
    "InvalidConfigurationError",
    "Validated",
    "ValidationIssue",
    "Validators",
    "validate_dataset",
    "run",
    "logger",
    "setup_rich_logging",
    "__version__",
]

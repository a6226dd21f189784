from __future__ import annotations

from collections import defaultdict
from typing import Any

from trenako_seeding.config import CommandOptions
from trenako_seeding.dataset import Dataset, SeedingError
from trenako_seeding.logging_utils import logger
from trenako_seeding.validator import Validated, validate_dataset


def run(options: CommandOptions) -> int:
    """Run the seeding command and return the process exit code.

    Without a dataset source there is nothing to seed and nothing is written.
    """
    if options.source is None:
        return 0

    try:
        dataset = Dataset.from_path(options.source)
    except SeedingError as e:
        logger.error(f"**ERROR** {e}")
        return 1

    logger.debug(f"Loaded dataset from {options.source}")
    if options.verbose:
        for line in str(dataset).splitlines():
            logger.debug(line)
        if len(dataset) > 0:
            logger.df("Dataset Resources", dataset.to_frame())

    results = validate_dataset(dataset)
    invalid = [result for result in results if not result.is_valid]
    if invalid:
        report_invalid(invalid)
        logger.error(f"{len(invalid)} of {len(results)} resource(s) failed validation.")
        return 1

    logger.success(f"Dataset is valid: {', '.join(str(dataset).splitlines())}.")
    return 0


def report_invalid(results: list[Validated]) -> None:
    rows: dict[str, list[Any]] = defaultdict(list)
    for result in results:
        for issue in result.errors:
            rows["file"].append(result.file_name)
            rows["resource type"].append(result.resource_type.value)
            rows["path"].append(issue.path or "/")
            rows["message"].append(issue.message)

    logger.table("Invalid Resources", **rows)

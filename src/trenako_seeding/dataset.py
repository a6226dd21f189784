from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import pandas as pd

from trenako_seeding.env import get_max_depth


class SeedingError(Exception):
    """Base class for failures while preparing a dataset for seeding."""


class DatasetPathNotFoundError(SeedingError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(f"path not found ({path})")
        self.path = Path(path)


class ResourceTypeNotFoundError(SeedingError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(f"unable to determine the resource type (path: {path})")
        self.path = Path(path)


class ResourceReadError(SeedingError):
    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"unable to read the resource (path: {path}): {reason}")
        self.path = Path(path)


class InvalidConfigurationError(SeedingError):
    pass


class ResourceType(str, Enum):
    """The kinds of resources in a dataset, named after the directory holding them."""

    BRANDS = "brands"
    CATALOG_ITEMS = "catalog_items"
    RAILWAYS = "railways"
    SCALES = "scales"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").rstrip("s")

    @classmethod
    def from_path(cls, path: Path) -> ResourceType:
        """Return the type of the nearest enclosing directory named after a resource type."""
        by_name = {member.value: member for member in cls}
        for part in reversed(path.parent.parts):
            resource_type = by_name.get(part)
            if resource_type is not None:
                return resource_type

        raise ResourceTypeNotFoundError(path)


@dataclass(frozen=True, slots=True)
class Resource:
    file_name: str
    resource_type: ResourceType
    content: str

    def __str__(self) -> str:
        return f"{self.resource_type.value} {self.file_name}"


@dataclass
class Dataset:
    """The resources of a trenako dataset, grouped by resource type."""

    brands: list[Resource] = field(default_factory=list)
    catalog_items: list[Resource] = field(default_factory=list)
    railways: list[Resource] = field(default_factory=list)
    scales: list[Resource] = field(default_factory=list)

    @classmethod
    def from_path(cls, root: str | Path, *, max_depth: int | None = None) -> Dataset:
        """Load every ``*.json`` file below ``root``.

        Files deeper than ``max_depth`` levels below the root are ignored; the
        default comes from ``TRENAKO_SEEDING_MAX_DEPTH`` (4 when unset).
        """
        root_path = Path(root)
        if not root_path.exists():
            raise DatasetPathNotFoundError(root_path)

        if max_depth is not None:
            depth = max_depth
        else:
            try:
                depth = get_max_depth()
            except ValueError as e:
                raise InvalidConfigurationError(str(e)) from e

        dataset = cls()
        for file_path in _walk_json_files(root_path, depth):
            resource_type = ResourceType.from_path(file_path)
            if file_path == root_path:
                file_name = file_path.name
            else:
                file_name = file_path.relative_to(root_path).as_posix()

            try:
                content = file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise ResourceReadError(file_path, str(e)) from e

            dataset.add(
                Resource(
                    file_name=file_name,
                    resource_type=resource_type,
                    content=content,
                )
            )

        return dataset

    def add(self, resource: Resource) -> None:
        self._bucket(resource.resource_type).append(resource)

    def get(self, resource_type: ResourceType) -> list[Resource]:
        return list(self._bucket(resource_type))

    def resources(self) -> Iterator[Resource]:
        for resource_type in ResourceType:
            yield from self._bucket(resource_type)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "resource_type": [r.resource_type.value for r in self.resources()],
                "file_name": [r.file_name for r in self.resources()],
            },
            columns=["resource_type", "file_name"],
        )

    def _bucket(self, resource_type: ResourceType) -> list[Resource]:
        return {
            ResourceType.BRANDS: self.brands,
            ResourceType.CATALOG_ITEMS: self.catalog_items,
            ResourceType.RAILWAYS: self.railways,
            ResourceType.SCALES: self.scales,
        }[resource_type]

    def __len__(self) -> int:
        return sum(len(self._bucket(t)) for t in ResourceType)

    def __str__(self) -> str:
        return "\n".join(
            f"{len(self._bucket(t))} {t.label}(s)" for t in ResourceType
        )


def _walk_json_files(root: Path, max_depth: int) -> Iterator[Path]:
    if root.is_file():
        if _is_json(root):
            yield root
        return

    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        depth = len(current.relative_to(root).parts)
        # files inside a subdirectory sit at depth + 2
        if depth + 2 > max_depth:
            dirnames.clear()
        else:
            dirnames.sort()

        if depth + 1 > max_depth:
            continue

        for name in sorted(filenames):
            path = current / name
            if path.is_file() and _is_json(path):
                yield path


def _is_json(path: Path) -> bool:
    return path.suffix.lower() == ".json"

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from pydantic import BaseModel, ValidationError

from trenako_seeding.dataset import Dataset, Resource, ResourceType
from trenako_seeding.schemas import Brand, CatalogItem, Railway, Scale

SCHEMAS: Mapping[ResourceType, type[BaseModel]] = {
    ResourceType.BRANDS: Brand,
    ResourceType.CATALOG_ITEMS: CatalogItem,
    ResourceType.RAILWAYS: Railway,
    ResourceType.SCALES: Scale,
}


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    path: str
    message: str


@dataclass(frozen=True, slots=True)
class Validated:
    file_name: str
    resource_type: ResourceType
    errors: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def instance_path(loc: Sequence[int | str]) -> str:
    """Render a pydantic error location as a JSON pointer (``/a/0/b``)."""
    return "".join(f"/{part}" for part in loc)


class Validator:
    """Validates resources of one type against a document model."""

    def __init__(self, schema: type[BaseModel]) -> None:
        self.schema = schema

    def validate(self, resource: Resource) -> Validated:
        try:
            self.schema.model_validate_json(resource.content)
        except ValidationError as e:
            issues = [
                ValidationIssue(path=instance_path(err["loc"]), message=err["msg"])
                for err in e.errors()
            ]
            return Validated(resource.file_name, resource.resource_type, issues)

        return Validated(resource.file_name, resource.resource_type)


class Validators:
    def __init__(self, schemas: Mapping[ResourceType, type[BaseModel]] | None = None) -> None:
        schemas = SCHEMAS if schemas is None else schemas
        missing = [t.value for t in ResourceType if t not in schemas]
        if missing:
            raise ValueError(f"No schema registered for: {', '.join(missing)}")

        self._validators = {t: Validator(schemas[t]) for t in ResourceType}

    def validate(self, resource: Resource) -> Validated:
        return self._validators[resource.resource_type].validate(resource)


def validate_dataset(dataset: Dataset, validators: Validators | None = None) -> list[Validated]:
    validators = Validators() if validators is None else validators
    return [validators.validate(resource) for resource in dataset.resources()]

# prisma_builder/core/services/schema_renderer.py
import logging
from typing import Callable, List, Sequence

from prisma_builder.core.exceptions import (
    MissingModelNameException,
    NoValidFieldsException,
)
from prisma_builder.core.schemas.fields import PrismaField, PrismaModel, ScalarType
from prisma_builder.core.utils.utils import split_csv

logger = logging.getLogger(__name__)

INDENT = "  "

AttributeRule = Callable[[PrismaField], List[str]]


def _id_attributes(field: PrismaField) -> List[str]:
    if not field.is_id:
        return []
    tokens = ["@id"]
    # Only Int ids keep their default; any other default on an id is dropped.
    if field.default_value and field.type == ScalarType.INT:
        tokens.append(f"@default({field.default_value})")
    return tokens


def _default_attributes(field: PrismaField) -> List[str]:
    if field.is_id or not field.default_value:
        return []
    if field.type == ScalarType.STRING:
        return [f'@default("{field.default_value}")']
    return [f"@default({field.default_value})"]


def _unique_attributes(field: PrismaField) -> List[str]:
    return ["@unique"] if field.is_unique else []


def _updated_at_attributes(field: PrismaField) -> List[str]:
    return ["@updatedAt"] if field.is_updated_at else []


def _map_attributes(field: PrismaField) -> List[str]:
    return [f'@map("{field.map_name}")'] if field.map_name else []


def _relation_attributes(field: PrismaField) -> List[str]:
    if not (field.relation_fields and field.relation_references):
        return []
    fields = ", ".join(split_csv(field.relation_fields))
    references = ", ".join(split_csv(field.relation_references))
    return [f"@relation(fields: [{fields}], references: [{references}])"]


# Order matters: it is the order the attributes appear on the line.
ATTRIBUTE_RULES: Sequence[AttributeRule] = (
    _id_attributes,
    _default_attributes,
    _unique_attributes,
    _updated_at_attributes,
    _map_attributes,
    _relation_attributes,
)


class SchemaRenderer:
    """Turn a model snapshot into a Prisma ``model`` block."""

    @classmethod
    def valid_fields(cls, model: PrismaModel) -> List[PrismaField]:
        """Fields with a non-blank name; the others are skipped silently."""
        return [f for f in model.fields if f.name.strip()]

    @classmethod
    def validate(cls, model: PrismaModel) -> List[PrismaField]:
        """
        Check the model can be rendered.

        Returns:
            The fields that will be rendered, in list order.

        Raises:
            MissingModelNameException: the name is empty after trimming.
            NoValidFieldsException: no field has a non-blank name.
        """
        if not model.name.strip():
            raise MissingModelNameException()

        fields = cls.valid_fields(model)
        if not fields:
            raise NoValidFieldsException()
        return fields

    @classmethod
    def attributes(cls, field: PrismaField) -> List[str]:
        tokens: List[str] = []
        for rule in ATTRIBUTE_RULES:
            tokens.extend(rule(field))
        return tokens

    @classmethod
    def render_field(cls, field: PrismaField) -> str:
        line = f"{INDENT}{field.name} {field.type.value}"
        if field.is_array:
            line += "[]"
        if field.is_optional:
            line += "?"

        attributes = cls.attributes(field)
        if attributes:
            line += " " + " ".join(attributes)
        return line

    @classmethod
    def render(cls, model: PrismaModel) -> str:
        fields = cls.validate(model)

        schema = f"model {model.name.strip()} {{\n"
        for field in fields:
            schema += cls.render_field(field) + "\n"
        schema += "}"

        logger.debug(
            "Rendered model %s with %d of %d fields",
            model.name.strip(),
            len(fields),
            len(model.fields),
        )
        return schema


def render(model: PrismaModel) -> str:
    return SchemaRenderer.render(model)

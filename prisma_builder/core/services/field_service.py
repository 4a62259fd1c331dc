# prisma_builder/core/services/field_service.py
from typing import Any, Dict, List, Mapping, Optional, Union

from prisma_builder.core.schemas.fields import (
    FieldUpdate,
    PrismaField,
    PrismaModel,
    ScalarType,
)
from prisma_builder.core.utils.utils import generate_field_id


# Conventional id / createdAt / updatedAt triplet a new model starts with
DEFAULT_FIELDS: List[Dict[str, Any]] = [
    {
        "name": "id",
        "type": ScalarType.INT,
        "is_id": True,
        "default_value": "autoincrement()",
    },
    {
        "name": "createdAt",
        "type": ScalarType.DATETIME,
        "default_value": "now()",
    },
    {
        "name": "updatedAt",
        "type": ScalarType.DATETIME,
        "is_updated_at": True,
    },
]

Updates = Union[FieldUpdate, Mapping[str, Any]]


class FieldService:
    """Pure operations over a model snapshot.

    Every method takes the current model and returns the next one; the input
    is never modified, so a snapshot can be rendered or compared at any time.
    """

    @classmethod
    def new_field(cls, taken: List[str], **attrs: Any) -> PrismaField:
        """Build a field with default attributes and a fresh id."""
        return PrismaField(id=generate_field_id(taken), **attrs)

    @classmethod
    def default_fields(cls) -> List[PrismaField]:
        fields: List[PrismaField] = []
        for attrs in DEFAULT_FIELDS:
            fields.append(cls.new_field([f.id for f in fields], **attrs))
        return fields

    @classmethod
    def create_model(
        cls, name: str = "", fields: Optional[List[Dict[str, Any]]] = None
    ) -> PrismaModel:
        """Create a model. Without ``fields`` it starts with the default triplet."""
        if fields is None:
            return PrismaModel(name=name, fields=cls.default_fields())

        built: List[PrismaField] = []
        for attrs in fields:
            attrs = {k: v for k, v in attrs.items() if k != "id"}
            built.append(cls.new_field([f.id for f in built], **attrs))
        return PrismaModel(name=name, fields=built)

    @classmethod
    def reset_model(cls) -> PrismaModel:
        """Blank model holding only the id field."""
        return cls.create_model("", DEFAULT_FIELDS[:1])

    @classmethod
    def add_field(cls, model: PrismaModel, **attrs: Any) -> PrismaModel:
        """Append a new field at the end of the list."""
        field = cls.new_field([f.id for f in model.fields], **attrs)
        return model.model_copy(update={"fields": [*model.fields, field]})

    @classmethod
    def remove_field(cls, model: PrismaModel, field_id: str) -> PrismaModel:
        """Drop the field with ``field_id``. Unknown ids leave the model as is."""
        if not cls.has_field(model, field_id):
            return model
        fields = [f for f in model.fields if f.id != field_id]
        return model.model_copy(update={"fields": fields})

    @classmethod
    def update_field(
        cls, model: PrismaModel, field_id: str, updates: Updates
    ) -> PrismaModel:
        """Merge ``updates`` over the matching field, keeping its position."""
        if not cls.has_field(model, field_id):
            return model

        if isinstance(updates, FieldUpdate):
            changes = updates.changes()
        else:
            changes = FieldUpdate.model_validate(dict(updates)).changes()

        fields = [
            PrismaField.model_validate({**f.model_dump(), **changes})
            if f.id == field_id
            else f
            for f in model.fields
        ]
        return model.model_copy(update={"fields": fields})

    @classmethod
    def rename_model(cls, model: PrismaModel, name: str) -> PrismaModel:
        return model.model_copy(update={"name": name})

    @classmethod
    def has_field(cls, model: PrismaModel, field_id: str) -> bool:
        return any(f.id == field_id for f in model.fields)

    @classmethod
    def get_field(cls, model: PrismaModel, field_id: str) -> Optional[PrismaField]:
        for field in model.fields:
            if field.id == field_id:
                return field
        return None

# prisma_builder/core/schemas/fields.py
from typing import Any, Dict, List, Optional
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ScalarType(str, Enum):
    STRING = "String"
    INT = "Int"
    BIG_INT = "BigInt"
    FLOAT = "Float"
    DECIMAL = "Decimal"
    BOOLEAN = "Boolean"
    DATETIME = "DateTime"
    JSON = "Json"
    BYTES = "Bytes"


class ValidationErrorKind(str, Enum):
    MISSING_MODEL_NAME = "MissingModelName"
    NO_VALID_FIELDS = "NoValidFields"


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire; both accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PrismaField(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    type: ScalarType = ScalarType.STRING
    is_array: bool = False
    is_optional: bool = False
    is_id: bool = False
    is_unique: bool = False
    is_updated_at: bool = False
    default_value: str = ""
    map_name: str = ""
    relation_fields: str = ""
    relation_references: str = ""


class PrismaModel(CamelModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    fields: List[PrismaField] = Field(default_factory=list)


class FieldUpdate(CamelModel):
    """Partial field attributes. Only keys that were sent are merged."""

    name: Optional[str] = None
    type: Optional[ScalarType] = None
    is_array: Optional[bool] = None
    is_optional: Optional[bool] = None
    is_id: Optional[bool] = None
    is_unique: Optional[bool] = None
    is_updated_at: Optional[bool] = None
    default_value: Optional[str] = None
    map_name: Optional[str] = None
    relation_fields: Optional[str] = None
    relation_references: Optional[str] = None

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class FieldCreate(FieldUpdate):
    """Attributes of a new field; anything left out keeps its default."""


class ModelCreate(CamelModel):
    name: str = ""
    fields: Optional[List[FieldCreate]] = None


class ModelRename(CamelModel):
    name: str


class RenderRequest(CamelModel):
    name: str = ""
    fields: List[FieldCreate] = Field(default_factory=list)


class SchemaResponse(CamelModel):
    name: str
    schema_text: str


class SessionResponse(CamelModel):
    session_id: str
    model: PrismaModel

from typing import Any, Dict, List, Tuple

from prisma_builder.core.schemas.fields import ScalarType


class FieldParseError(ValueError):
    """Raised when a field definition string cannot be understood."""


class FieldParser:
    """Parse compact field definitions such as ``email:String?;unique``."""

    # Common type mappings
    TYPE_MAPPINGS = {
        'string': ScalarType.STRING,
        'str': ScalarType.STRING,
        'int': ScalarType.INT,
        'integer': ScalarType.INT,
        'bigint': ScalarType.BIG_INT,
        'float': ScalarType.FLOAT,
        'decimal': ScalarType.DECIMAL,
        'boolean': ScalarType.BOOLEAN,
        'bool': ScalarType.BOOLEAN,
        'datetime': ScalarType.DATETIME,
        'json': ScalarType.JSON,
        'dict': ScalarType.JSON,
        'bytes': ScalarType.BYTES,
    }

    # Bare flags
    FLAG_ATTRIBUTES = {
        'id': 'is_id',
        'unique': 'is_unique',
        'updatedat': 'is_updated_at',
    }

    # key=value attributes
    VALUE_ATTRIBUTES = {
        'default': 'default_value',
        'map': 'map_name',
        'fields': 'relation_fields',
        'references': 'relation_references',
    }

    @classmethod
    def parse_field(cls, field_definition: str) -> Dict[str, Any]:
        """
        Parse a field definition string and return field attributes.

        Args:
            field_definition: ``name:Type[modifiers][;attr]...`` where the type
                may end in ``[]`` and/or ``?`` and each attr is ``id``,
                ``unique``, ``updatedAt`` or ``key=value`` with key one of
                ``default``, ``map``, ``fields``, ``references``.

        Returns:
            Keyword arguments for building a field.
        """
        # Clean the input
        field_definition = field_definition.strip()
        if not field_definition:
            raise FieldParseError("Empty field definition")

        head, *attribute_parts = field_definition.split(';')

        # Split field name and type; a missing type means String
        if ':' in head:
            name_part, type_part = head.split(':', 1)
        else:
            name_part, type_part = head, 'String'

        field_name = name_part.strip()
        if not field_name:
            raise FieldParseError(f"Missing field name in '{field_definition}'")

        field_type, is_array, is_optional = cls._parse_type(type_part)

        info: Dict[str, Any] = {
            'name': field_name,
            'type': field_type,
            'is_array': is_array,
            'is_optional': is_optional,
        }
        for part in attribute_parts:
            if not part.strip():
                continue
            key, value = cls._parse_attribute(part)
            info[key] = value
        return info

    @classmethod
    def parse_fields(cls, definitions: List[str]) -> List[Dict[str, Any]]:
        return [cls.parse_field(definition) for definition in definitions]

    @classmethod
    def _parse_type(cls, type_part: str) -> Tuple[ScalarType, bool, bool]:
        """Split ``Type[]?`` into the base type and its list/optional markers."""
        clean_type = type_part.strip()

        is_optional = clean_type.endswith('?')
        if is_optional:
            clean_type = clean_type[:-1]

        is_array = clean_type.endswith('[]')
        if is_array:
            clean_type = clean_type[:-2]

        base_type = cls.TYPE_MAPPINGS.get(clean_type.strip().lower())
        if base_type is None:
            known = ", ".join(t.value for t in ScalarType)
            raise FieldParseError(
                f"Unknown type '{type_part.strip()}'. Use one of: {known}"
            )
        return base_type, is_array, is_optional

    @classmethod
    def _parse_attribute(cls, part: str) -> Tuple[str, Any]:
        part = part.strip()
        if '=' in part:
            key, value = part.split('=', 1)
            attr = cls.VALUE_ATTRIBUTES.get(key.strip().lower())
            if attr is None:
                raise FieldParseError(f"Unknown attribute '{key.strip()}'")
            return attr, value.strip()

        attr = cls.FLAG_ATTRIBUTES.get(part.lower())
        if attr is None:
            raise FieldParseError(f"Unknown attribute '{part}'")
        return attr, True

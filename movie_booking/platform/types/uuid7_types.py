"""
Pydantic integration for uuid_utils.UUID

https://docs.pydantic.dev/latest/concepts/types/#customizing-validation-with-__get_pydantic_core_schema__

Booking ids are UUID7 values generated with uuid_utils, which pydantic and
FastAPI cannot validate, serialize or document on their own. `UUID7` is a
drop-in annotation for request/response models and path parameters:

- input: accepts a uuid_utils.UUID or its string form
- output: always a string
- OpenAPI: `{"type": "string", "format": "uuid"}`
"""

from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from uuid_utils import UUID


def _parse_uuid(value: Any) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError as e:
        raise ValueError(f'Invalid UUID: {value}') from e


class UUID7(UUID):
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(_parse_uuid),
            ]
        )
        # JSON has no UUID type, so JSON input is string-only; Python input may
        # already be a UUID object (e.g. building a response from an entity)
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(UUID), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used='always', return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        # handler(schema) would expand the validator chain into the OpenAPI document
        return {'type': 'string', 'format': 'uuid'}

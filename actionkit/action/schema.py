"""
Input validation for actions, backed by pydantic models.

Depends on: errors
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from actionkit.errors import ActionValidationError


class EmptySchema(BaseModel):
    """Input for actions that take no arguments."""
    model_config = ConfigDict(extra="forbid")


def is_schema(obj: Any) -> bool:
    return isinstance(obj, type) and issubclass(obj, BaseModel)


def validate_args(action_name: str, schema: type[BaseModel], args: Any) -> BaseModel:
    """Validate raw input against an action schema.

    Model instances, including instances of ``schema`` itself, are dumped and
    validated again: fields can be reassigned after construction and
    ``model_construct`` skips validation entirely. None is treated as an empty
    object so no-argument actions can be invoked without a payload.

    Raises:
        ActionValidationError: with one entry per violated constraint.
    """
    if args is None:
        args = {}
    elif isinstance(args, BaseModel):
        args = args.model_dump(warnings=False)
    try:
        return schema.model_validate(args)
    except ValidationError as e:
        errors = [
            {"loc": tuple(err.get("loc", ())), "msg": err.get("msg", ""), "type": err.get("type", "")}
            for err in e.errors(include_url=False)
        ]
        raise ActionValidationError(action_name, errors) from e


def schema_parameters(schema: type[BaseModel]) -> dict:
    """JSON Schema object for the input, in function-calling shape.

    Field descriptions and constraints are kept so a tool-calling model can
    read them. ``additionalProperties`` is false for strict schemas.
    """
    json_schema = schema.model_json_schema()
    params: dict = {
        "type": "object",
        "properties": json_schema.get("properties", {}),
        "required": json_schema.get("required", []),
    }
    if "$defs" in json_schema:
        params["$defs"] = json_schema["$defs"]
    if schema.model_config.get("extra") == "forbid":
        params["additionalProperties"] = False
    return params

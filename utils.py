from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from errors import ValidationError


def load_json(schema: type[BaseModel], message: str = "Validation failed") -> BaseModel:
    """Validate the JSON request body against ``schema`` or raise a 400."""
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValidationError({"body": ["Expected a JSON object"]}, message)
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc, message) from exc


def no_cache(response):
    """Mark a response as never cacheable by browsers or proxies."""
    response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, proxy-revalidate"
    response.headers["Pragma"] = "no-cache"
    response.headers["Expires"] = "0"
    response.headers["Surrogate-Control"] = "no-store"
    return response

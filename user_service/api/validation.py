"""Request body validation decorator.

@validate_request binds the JSON (or form) body of a request to the Pydantic
model named in the view's type annotations and passes the validated model to
the view. Pydantic errors are converted to ValidationError (400).
"""

import inspect
from functools import wraps

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError


def _find_model_param(f) -> tuple[str, type[BaseModel]]:
    for name, param in inspect.signature(f).parameters.items():
        annotation = param.annotation
        if inspect.isclass(annotation) and issubclass(annotation, BaseModel):
            return name, annotation
    raise TypeError(f"{f.__name__} has no parameter annotated with a Pydantic model")


def _request_payload():
    if request.is_json:
        return request.get_json(silent=True)
    return request.form.to_dict()


def validate_request(f):
    """
    Validate the request body against the view's Pydantic model parameter.

    Example:
    ```python
    @accounts_bp.post("/login")
    @validate_request
    def login(data: LoginRequest):
        ...
    ```
    """
    param_name, model = _find_model_param(f)

    @wraps(f)
    def wrapper(*args, **kwargs):
        payload = _request_payload()
        if not isinstance(payload, dict):
            raise ValidationError("fail to bind input, request body must be a JSON object")

        try:
            kwargs[param_name] = model(**payload)
        except PydanticValidationError as e:
            raise ValidationError(
                "Invalid request data",
                {"errors": e.errors(include_url=False, include_context=False)}
            )

        return f(*args, **kwargs)

    return wrapper

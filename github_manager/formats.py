# =============================================================================
# GitHub Manager - Response Formats
# =============================================================================
"""
Output format selection for manager methods.

Every manager method accepts a `fmt` argument choosing how the response body
is handed back: untouched, parsed into plain JSON containers, or validated
into the pydantic record for the resource.
"""

import json
from enum import Enum
from typing import Any, TypeVar, Union

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


class ReturnFormat(str, Enum):
    """
    Recognized output formats.

    Attributes:
        RAW: The unparsed response body string.
        JSON: A parsed but untyped `dict` or `list`.
        MODEL: A typed pydantic record (or list of records).
    """

    RAW = "raw"
    JSON = "json"
    MODEL = "model"


def format_response(
    body: str, fmt: ReturnFormat, model: type[ModelT]
) -> Union[ModelT, dict[str, Any], str]:
    """
    Return an object payload in the requested format.

    Args:
        body: Raw response body.
        fmt: Requested output format.
        model: Pydantic model describing the payload.

    Returns:
        The body string, the parsed dict, or a validated model.

    Raises:
        ValueError: If `fmt` is not a ReturnFormat member.
    """
    fmt = ReturnFormat(fmt)
    if fmt is ReturnFormat.RAW:
        return body
    if fmt is ReturnFormat.JSON:
        return json.loads(body)
    return model.model_validate_json(body)


def format_list_response(
    body: str, fmt: ReturnFormat, model: type[ModelT]
) -> Union[list[ModelT], list[Any], str]:
    """
    Return a top-level JSON array payload in the requested format.

    One record is built per array element, in response order.

    Args:
        body: Raw response body.
        fmt: Requested output format.
        model: Pydantic model describing one array element.

    Returns:
        The body string, the parsed list, or a list of validated models.

    Raises:
        ValueError: If `fmt` is not a ReturnFormat member.
    """
    fmt = ReturnFormat(fmt)
    if fmt is ReturnFormat.RAW:
        return body
    items = json.loads(body)
    if fmt is ReturnFormat.JSON:
        return items
    return [model.model_validate(item) for item in items]

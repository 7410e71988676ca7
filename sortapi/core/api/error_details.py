from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field
from starlette import status as http_status

from sortapi.core.models import SortAPIModel


class ErrorParameter(SortAPIModel):
    name: str = Field(
        ...,
        title="Parameter Name",
        description="Parameter name use for input",
    )
    value: Optional[Union[dict, list, str, BaseModel]] = Field(  # keep BaseModel last for annotation not for parsing
        ...,
        title="Parameter Value",
        description="Parameter value",
    )


class ErrorDetails(SortAPIModel):
    detail: str = Field(
        ...,
        title="Error text message",
        examples=["Invalid sorting field 'owner' for projects"],
        description="A human-readable explanation of the error",
    )


class HttpErrorDetails(ErrorDetails):
    status: int = Field(
        ...,
        title="HTTP status code",
        examples=["4XX / 5XX"],
        description="http error status code 4XX or 5XX",
    )
    type: Optional[str] = Field(
        "apiError",
        title="Error type",
        examples=["apiError"],
        description="Identifies the error type",
    )
    title: Optional[str] = Field(
        None,
        title="Error text message",
        examples=["Bad Request Error"],
        description="A brief, human-readable message about the error",
    )
    parameters: Optional[List[ErrorParameter]] = Field(
        None,
        title="Error parameters",
        examples=[[{"name": "sorting", "value": "owner:asc"}]],
        description=(
            "Optional field that may contains additional information. The structure is error field name coupled with"
            " the value error"
        ),
    )


class BadRequestHttpErrorDetails(HttpErrorDetails):
    status: int = Field(
        http_status.HTTP_400_BAD_REQUEST,
        title="HTTP Bad Request",
        examples=["400"],
        description="HTTP bad request error status code",
    )
    type: Optional[str] = Field(
        "badRequestError",
        title="Error type",
        examples=["badRequestError"],
        description="Identifies the error type",
    )
    title: Optional[str] = Field(
        "Bad Request Error",
        title="Error text message",
        examples=["Bad Request Error"],
        description="A brief, human-readable message about the error",
    )

from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from sortapi.core.api import error_details
from sortapi.core.exceptions import SortAPIError


class SortAPIHttpError(HTTPException, SortAPIError):
    def __init__(self, details: error_details.HttpErrorDetails, headers: Optional[Dict[str, Any]] = None) -> None:
        HTTPException.__init__(
            self, status_code=details.status, detail=details.model_dump(mode="json", by_alias=True), headers=headers
        )


# 400
class BadRequestHttpError(SortAPIHttpError):
    def __init__(
        self,
        message: str,
        headers: Optional[Dict[str, Any]] = None,
        parameters: Optional[List[error_details.ErrorParameter]] = None,
    ) -> None:
        details = error_details.BadRequestHttpErrorDetails(
            detail=message,
            parameters=parameters,
        )
        super().__init__(details=details, headers=headers)

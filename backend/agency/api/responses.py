"""Envelope Responses — turns an ActionResult into an HTTP response."""

from fastapi.responses import JSONResponse

from agency.core.action_result import ActionFailure, ActionResult, ActionSuccess


def envelope_response(result: ActionResult, success_status: int = 200) -> JSONResponse:
    match result:
        case ActionSuccess():
            return JSONResponse(status_code=success_status, content=result.to_dict())
        case ActionFailure():
            return JSONResponse(status_code=result.http_status, content=result.to_dict())

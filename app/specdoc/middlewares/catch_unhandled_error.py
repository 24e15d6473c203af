from html import escape

from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from ..config import config
from ..libs import Logger
from ..models.project_type import ProjectType

log = Logger.get_logger(__name__)


class CatchUnhandledErrorMiddleware:
    """Turn unhandled errors into 500 responses shaped for the project type

    RESTful APIs get a JSON body, web applications an HTML page. The error
    detail is only exposed in development mode.
    """

    def __init__(self, project_type: ProjectType = ProjectType.RESTFUL_API):
        self.project_type = project_type

    async def __call__(self, request: Request, call_next):
        try:
            response: Response = await call_next(request)
            return response

        except Exception as e:
            log.critical(f"Unhandled error for request {request.url.path}: {str(e)}")

            if config.server.dev_mode:
                detail = str(e)
            else:
                detail = "An unexpected error occurred"

            if self.project_type is ProjectType.WEB_APPLICATION:
                return HTMLResponse(
                    status_code=500,
                    content=(
                        "<!DOCTYPE html><html><head><title>Internal Server Error</title></head>"
                        f"<body><h1>Internal Server Error</h1><p>{escape(detail)}</p></body></html>"
                    ),
                )
            return JSONResponse(
                status_code=500,
                content={"message": "Internal Server Error", "detail": detail},
            )

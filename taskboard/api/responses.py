"""Response classes shared by the routers and the error handlers"""

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    """JSON response declaring its charset in the Content-Type header"""

    media_type = "application/json; charset=utf-8"

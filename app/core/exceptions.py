from fastapi import HTTPException


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=404, detail=detail)


class ConflictError(HTTPException):
    def __init__(self, detail: str = "Resource already exists"):
        super().__init__(status_code=409, detail=detail)


class ForbiddenError(HTTPException):
    def __init__(self, detail: str = "Operation not permitted"):
        super().__init__(status_code=403, detail=detail)


class NotPublishedError(ForbiddenError):
    def __init__(self, detail: str = "Post is not published"):
        super().__init__(detail=detail)


class ValidationFailedError(HTTPException):
    def __init__(self, detail: str = "Invalid request"):
        super().__init__(status_code=400, detail=detail)

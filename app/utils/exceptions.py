"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Services raise these directly; FastAPI turns them into JSON error responses
with the matching status code.

Usage:
    from app.utils.exceptions import NotFoundError, BadRequestError
    raise NotFoundError("Employee not found")
    raise BadRequestError("Combination #1 must contain at least 2 reward types")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found: 요청한 리소스(지점, 직원 등)가 없을 때 사용."""

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ForbiddenError(HTTPException):
    """403 Forbidden: 권한 레벨 부족 시 사용.

    Raised when the authenticated user lacks the required permission level
    (e.g. a staff account calling the admin console).
    """

    def __init__(self, detail: str = "Insufficient permissions") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized: 인증 정보가 없거나 잘못되었을 때 사용."""

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request: Pydantic 검증 이후의 비즈니스 규칙 위반.

    Raised when request data passes schema validation but breaks a business
    rule (e.g. an allowed combination that uses a disabled reward type).
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

from fastapi import HTTPException, status


class InvalidArgumentError(HTTPException):
    """잘못된 입력 (사용자 ID 누락, 시작일이 종료일보다 늦은 기간 등)"""

    def __init__(self, detail: str = "잘못된 요청입니다."):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class NotFoundOrForbiddenError(HTTPException):
    """일정이 없거나 요청한 사용자의 일정이 아님. 두 경우를 구분하지 않는다."""

    def __init__(self, plan_id: int | None = None, detail: str | None = None):
        if detail is None:
            detail = f"해당 일정을 찾을 수 없거나 권한이 없습니다: {plan_id}"
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

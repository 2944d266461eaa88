from pydantic import BaseModel


class PatchModel(BaseModel):
    """부분 수정 요청의 공통 베이스.

    요청 본문에 명시된 필드(model_fields_set)만 반영 대상이다. 명시되었더라도
    값이 null이면 생략한 것과 같게 취급하므로, memo처럼 비울 수 있는 필드도
    null로 지울 수는 없다. 빈 문자열을 보내면 빈 값으로 덮어쓴다.
    """

    def provided(self) -> dict:
        """요청에 명시되었고 null이 아닌 필드만 반환"""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }

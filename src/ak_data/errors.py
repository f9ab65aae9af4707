"""게임 데이터 구성 오류

모든 오류는 어느 테이블의 어느 단계에서 실패했는지 함께 전달합니다.
누락된 교차 참조(스킬 ID, 도감 항목 등)는 오류가 아니며 여기에 없습니다.
"""

from typing import Optional


class GameDataError(Exception):
    """GameData 구성 실패의 기반 클래스"""

    default_stage: Optional[str] = None

    def __init__(self, message: str, table: Optional[str] = None, stage: Optional[str] = None):
        super().__init__(message)
        self.table = table
        self.stage = stage or self.default_stage

    def __str__(self) -> str:
        base = super().__str__()
        context = ":".join(part for part in (self.stage, self.table) if part)
        return f"[{context}] {base}" if context else base


class SourceUnavailable(GameDataError):
    """테이블에 접근할 수 없음 (네트워크/파일 시스템 오류)

    호출 측에서 재시도할 수 있습니다. 내부적으로 재시도하지 않습니다.
    """

    default_stage = "load"


class SourceNotFound(GameDataError):
    """요청한 리전에 테이블이 없음

    일부 리전 트리는 테이블을 생략하므로, 호출 측에서 다른 리전으로
    대체할 수 있도록 일반 I/O 오류와 구분합니다.
    """

    default_stage = "load"


class MalformedRecord(GameDataError):
    """레코드가 필수 필드 조건을 위반함 (복구 불가)"""

    default_stage = "decode"

    def __init__(
        self,
        table: str,
        record_id: Optional[str] = None,
        detail: Optional[str] = None,
    ):
        if record_id is None:
            message = f"잘못된 테이블 형식: {table}"
        else:
            message = f"잘못된 레코드: {table}[{record_id!r}]"
        if detail:
            message = f"{message} - {detail}"
        super().__init__(message, table=table)
        self.record_id = record_id
        self.detail = detail

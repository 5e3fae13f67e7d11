from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from enum import Enum, IntEnum


class TransferType(IntEnum):
    """포인트 이체 유형"""

    INIT = 0  # 가입 초기 지급
    ADD_ARTICLE = 1  # 글 작성
    UPDATE_ARTICLE = 2  # 글 수정
    ADD_COMMENT = 3  # 댓글 작성
    ADD_ARTICLE_REWARD = 4  # 글에 후원 설정
    ARTICLE_REWARD = 5  # 글 후원
    INVITE_REGISTER = 6  # 초대한 사용자 가입
    INVITED_REGISTER = 7  # 초대받아 가입
    ACTIVITY_CHECKIN = 8  # 출석 체크


class TransferDirection(str, Enum):
    """조회 사용자 기준 이체 방향"""

    OUTGOING = "OUTGOING"
    INCOMING = "INCOMING"


class TransferRecord(BaseModel):
    """포인트 이체 원장 레코드 (저장된 그대로, 불변)"""

    id: str = Field(..., description="이체 ID (생성 순 정렬 키)")
    from_id: str = Field(..., description="지급자 ID")
    to_id: str = Field(..., description="수령자 ID")
    type: int = Field(..., description="이체 유형")
    sum: int = Field(..., ge=0, description="이체 금액")
    from_balance: int = Field(..., description="이체 직후 지급자 잔액")
    to_balance: int = Field(..., description="이체 직후 수령자 잔액")
    data_id: str = Field("", description="이체 원인 엔티티 ID")
    time: int = Field(..., description="생성 시각 (epoch millis)")

    class Config:
        from_attributes = True
        frozen = True


class DisplayRecord(TransferRecord):
    """조회 사용자 관점으로 가공된 이체 내역 항목"""

    direction: TransferDirection = Field(..., description="이체 방향")
    sign: str = Field(..., description="부호 (- 또는 +)")
    balance_after: int = Field(..., description="조회 사용자의 이체 후 잔액")
    display_type: str = Field(..., description="현지화된 유형 라벨")
    description: str = Field(..., description="현지화된 상세 설명 (링크 포함)")
    create_time: datetime = Field(..., description="생성 시간")


class PointTransferPage(BaseModel):
    """포인트 이체 내역 페이지 응답"""

    total_count: int = Field(..., description="전체 항목 수")
    items: List[DisplayRecord] = Field(..., description="이체 내역 (최신순)")


class UserSummary(BaseModel):
    """잔액 순위 항목"""

    id: str = Field(..., description="사용자 ID")
    user_name: str = Field(..., description="사용자 이름")
    point: int = Field(..., description="현재 잔액")
    app_role: int = Field(..., description="앱 역할")
    point_hex: Optional[str] = Field(None, description="16진수 잔액 (HACKER)")
    point_cc: Optional[str] = Field(None, description="축약 잔액 표기")

    class Config:
        from_attributes = True

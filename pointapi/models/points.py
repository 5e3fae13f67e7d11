"""
포인트 이체 데이터 모델

사용자 간(또는 시스템 계정과 사용자 간) 포인트 이동을 한 건씩 기록하는
추가 전용(append-only) 원장 테이블을 정의합니다.
"""

from sqlalchemy import BigInteger, Column, Index, Integer, String

from pointapi.models.base import BaseModel


class PointTransfer(BaseModel):
    """
    포인트 이체 테이블 - 모든 포인트 이동 내역을 저장

    이 테이블은 다음 원칙을 따릅니다:
    1. 불변성(Immutable): 한번 생성된 레코드는 수정되지 않음
    2. 스냅샷(Snapshot): from_balance/to_balance는 이체 직후 양측 잔액
    3. 정렬(Ordering): id는 생성 순서대로 증가하는 고정 길이 문자열
    """

    __tablename__ = "pointtransfer"
    __table_args__ = (
        Index("idx_pointtransfer_from_id", "from_id"),
        Index("idx_pointtransfer_to_id_type", "to_id", "type"),
    )

    # 기본 키 - 생성 시각 기반의 정렬 가능한 식별자
    id = Column(String(19), primary_key=True)

    # 지급자 - 일부 타입에서는 시스템 포인트 풀 계정
    from_id = Column(String(19), nullable=False)

    # 수령자
    to_id = Column(String(19), nullable=False)

    # 이체 유형 - TransferType 참조
    type = Column(Integer, nullable=False)

    # 이체 금액 (0 이상)
    sum = Column(Integer, nullable=False)

    # 이체 직후 지급자/수령자 잔액
    from_balance = Column(Integer, nullable=False)
    to_balance = Column(Integer, nullable=False)

    # 이체를 발생시킨 엔티티 ID - 유형에 따라 글/댓글/후원/사용자 ID
    data_id = Column(String(19), nullable=False, default="")

    # 생성 시각 (epoch millis)
    time = Column(BigInteger, nullable=False)

"""
포인트 이체 리포지토리 - 원장 조회 전용

원장 레코드는 추가만 되고 수정되지 않으므로 이 리포지토리는 쓰기 작업을
제공하지 않습니다. 모든 조회는 id 내림차순(최신순)으로 정렬됩니다.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from sqlalchemy import and_, desc, or_
from sqlalchemy.orm import Session

from pointapi.models.points import PointTransfer as PointTransferModel
from pointapi.repositories.base import BaseRepository
from pointapi.schemas.points import TransferRecord


class FilterOperator(str, Enum):
    AND = "AND"
    OR = "OR"


@dataclass(frozen=True)
class TransferFilter:
    """이체 조회 조건 - 지정된 필드의 동등 비교를 AND/OR로 결합"""

    from_id: Optional[str] = None
    to_id: Optional[str] = None
    type: Optional[int] = None
    operator: FilterOperator = FilterOperator.AND

    @classmethod
    def involving(cls, user_id: str) -> "TransferFilter":
        """user_id가 지급자이거나 수령자인 이체"""
        return cls(from_id=user_id, to_id=user_id, operator=FilterOperator.OR)

    @classmethod
    def received(cls, user_id: str, type: int) -> "TransferFilter":
        """user_id가 수령한 특정 유형의 이체"""
        return cls(to_id=user_id, type=type, operator=FilterOperator.AND)


class PointsRepository(BaseRepository[PointTransferModel, TransferRecord]):
    """포인트 이체 원장 리포지토리"""

    def __init__(self, db: Session):
        super().__init__(PointTransferModel, TransferRecord, db)

    def _build_condition(self, transfer_filter: TransferFilter):
        clauses = []
        if transfer_filter.from_id is not None:
            clauses.append(self.model_class.from_id == transfer_filter.from_id)
        if transfer_filter.to_id is not None:
            clauses.append(self.model_class.to_id == transfer_filter.to_id)
        if transfer_filter.type is not None:
            clauses.append(self.model_class.type == transfer_filter.type)

        if not clauses:
            return None
        if transfer_filter.operator == FilterOperator.OR:
            return or_(*clauses)
        return and_(*clauses)

    def query(
        self, transfer_filter: TransferFilter, page_num: int = 1, page_size: int = 20
    ) -> Tuple[List[TransferRecord], int]:
        """
        조건에 맞는 이체 한 페이지와 전체 건수 조회

        Args:
            transfer_filter: 조회 조건
            page_num: 1부터 시작하는 페이지 번호
            page_size: 페이지 크기

        Returns:
            (id 내림차순 레코드 목록, 조건에 맞는 전체 건수)
        """
        query = self.db.query(self.model_class)
        condition = self._build_condition(transfer_filter)
        if condition is not None:
            query = query.filter(condition)

        total_count = query.count()
        rows = (
            query.order_by(desc(self.model_class.id))
            .offset((page_num - 1) * page_size)
            .limit(page_size)
            .all()
        )
        return self._to_schemas(rows), total_count

    def get_latest(self, user_id: str, type: int, fetch_size: int) -> List[TransferRecord]:
        """user_id가 수령한 특정 유형의 최근 이체"""
        records, _ = self.query(
            TransferFilter.received(user_id, type), page_num=1, page_size=fetch_size
        )
        return records

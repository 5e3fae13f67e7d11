from typing import List

from sqlalchemy import desc
from sqlalchemy.orm import Session

from pointapi.models.user import User as UserModel
from pointapi.repositories.base import BaseRepository
from pointapi.schemas.entities import User as UserSchema


class UserRepository(BaseRepository[UserModel, UserSchema]):
    """사용자 리포지토리"""

    def __init__(self, db: Session):
        super().__init__(UserModel, UserSchema, db)

    def get_top_balance_users(self, fetch_size: int) -> List[UserSchema]:
        """잔액 내림차순으로 상위 fetch_size명 조회"""
        rows = (
            self.db.query(self.model_class)
            .order_by(desc(self.model_class.point), self.model_class.id)
            .limit(fetch_size)
            .all()
        )
        return self._to_schemas(rows)

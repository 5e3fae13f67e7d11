from enum import IntEnum

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pointapi.models.base import BaseModel


class UserAppRole(IntEnum):
    """사용자 앱 역할 - 잔액 표기 방식에만 영향을 준다"""

    HACKER = 0
    PAINTER = 1


class User(BaseModel):
    __tablename__ = "user"
    __table_args__ = (Index("idx_user_point", "point"),)

    id: Mapped[str] = mapped_column(String(19), primary_key=True)
    user_name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    # 현재 포인트 잔액
    point: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    app_role: Mapped[int] = mapped_column(
        Integer, nullable=False, default=UserAppRole.HACKER
    )

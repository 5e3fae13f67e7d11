from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pointapi.models.base import BaseModel


class Reward(BaseModel):
    """글 후원 기록 - 포인트 이체의 data_id가 이 테이블을 가리킨다"""

    __tablename__ = "reward"

    id: Mapped[str] = mapped_column(String(19), primary_key=True)
    sender_id: Mapped[str] = mapped_column(String(19), nullable=False)
    # 후원 대상 글 ID
    data_id: Mapped[str] = mapped_column(String(19), nullable=False)
    type: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from pointapi.models.base import BaseModel


class Comment(BaseModel):
    __tablename__ = "comment"

    id: Mapped[str] = mapped_column(String(19), primary_key=True)
    # 댓글이 달린 글 ID
    on_article_id: Mapped[str] = mapped_column(String(19), nullable=False)

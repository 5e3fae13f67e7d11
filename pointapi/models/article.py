from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pointapi.models.base import BaseModel


class Article(BaseModel):
    __tablename__ = "article"

    id: Mapped[str] = mapped_column(String(19), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False, default="")
    permalink: Mapped[str] = mapped_column(Text, nullable=False, default="")

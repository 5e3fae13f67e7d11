"""Read-only views of the entities a point transfer can reference."""

from pydantic import BaseModel


class Article(BaseModel):
    id: str
    title: str = ""
    permalink: str = ""

    class Config:
        from_attributes = True


class Comment(BaseModel):
    id: str
    on_article_id: str

    class Config:
        from_attributes = True


class Reward(BaseModel):
    id: str
    sender_id: str
    data_id: str
    type: int = 0

    class Config:
        from_attributes = True


class User(BaseModel):
    id: str
    user_name: str
    point: int = 0
    app_role: int = 0

    class Config:
        from_attributes = True

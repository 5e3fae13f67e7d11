"""Narrow lookup capabilities the ledger enrichment depends on.

Each resolver returns ``None`` when the referenced entity does not exist.
The SQLAlchemy repositories satisfy these protocols structurally.
"""

from typing import Optional, Protocol

from pointapi.schemas.entities import Article, Comment, Reward, User


class ArticleResolver(Protocol):
    def get_by_id(self, id: str) -> Optional[Article]: ...


class CommentResolver(Protocol):
    def get_by_id(self, id: str) -> Optional[Comment]: ...


class RewardResolver(Protocol):
    def get_by_id(self, id: str) -> Optional[Reward]: ...


class UserResolver(Protocol):
    def get_by_id(self, id: str) -> Optional[User]: ...


class Localizer(Protocol):
    def get(self, key: str, locale: Optional[str] = None) -> str: ...

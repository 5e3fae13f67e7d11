from sqlalchemy.orm import Session

from pointapi.models.article import Article as ArticleModel
from pointapi.models.comment import Comment as CommentModel
from pointapi.repositories.base import BaseRepository
from pointapi.schemas.entities import Article, Comment


class ArticleRepository(BaseRepository[ArticleModel, Article]):
    """글 리포지토리"""

    def __init__(self, db: Session):
        super().__init__(ArticleModel, Article, db)


class CommentRepository(BaseRepository[CommentModel, Comment]):
    """댓글 리포지토리"""

    def __init__(self, db: Session):
        super().__init__(CommentModel, Comment, db)

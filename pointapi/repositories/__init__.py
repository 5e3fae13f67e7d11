# Repository layer - Read-only data access with Pydantic responses

from .base import BaseRepository
from .points_repository import PointsRepository, TransferFilter, FilterOperator
from .article_repository import ArticleRepository, CommentRepository
from .rewards_repository import RewardsRepository
from .user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "PointsRepository",
    "TransferFilter",
    "FilterOperator",
    "ArticleRepository",
    "CommentRepository",
    "RewardsRepository",
    "UserRepository",
]

from sqlalchemy.orm import Session

from pointapi.models.rewards import Reward as RewardModel
from pointapi.repositories.base import BaseRepository
from pointapi.schemas.entities import Reward


class RewardsRepository(BaseRepository[RewardModel, Reward]):
    """후원 리포지토리"""

    def __init__(self, db: Session):
        super().__init__(RewardModel, Reward, db)

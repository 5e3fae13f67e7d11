from .points import (
    DisplayRecord,
    PointTransferPage,
    TransferDirection,
    TransferRecord,
    TransferType,
    UserSummary,
)
from .entities import Article, Comment, Reward, User

"""
데모 원장 시드 스크립트
사용자 3명, 글/댓글/후원과 그에 따른 포인트 이체 내역을 생성
"""

import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import time

from pointapi.config import settings
from pointapi.database.connection import SessionLocal
from pointapi.models.article import Article
from pointapi.models.comment import Comment
from pointapi.models.points import PointTransfer
from pointapi.models.rewards import Reward
from pointapi.models.user import User, UserAppRole
from pointapi.schemas.points import TransferType

POOL_ID = "0"


def seed_ledger_data():
    """데모 사용자와 이체 내역 시드"""

    now = int(time.time() * 1000)
    grant = settings.POINT_INIT_GRANT

    users = [
        User(id="1000000000000000001", user_name="alice", point=grant + 520, app_role=UserAppRole.HACKER),
        User(id="1000000000000000002", user_name="bob", point=grant - 35, app_role=UserAppRole.PAINTER),
        User(id="1000000000000000003", user_name="carol", point=grant, app_role=UserAppRole.PAINTER),
    ]
    alice, bob, carol = users

    # (type, from, to, sum, data_id) - 시간 순
    movements = [
        (TransferType.INIT, POOL_ID, alice.id, grant, ""),
        (TransferType.INIT, POOL_ID, bob.id, grant, ""),
        (TransferType.INIT, POOL_ID, carol.id, grant, ""),
        (TransferType.ADD_ARTICLE, alice.id, POOL_ID, 20, "2000000000000000001"),
        (TransferType.ADD_COMMENT, bob.id, alice.id, 5, "3000000000000000001"),
        (TransferType.ARTICLE_REWARD, bob.id, alice.id, 30, "4000000000000000001"),
        (TransferType.ACTIVITY_CHECKIN, POOL_ID, alice.id, 505, ""),
    ]

    db = SessionLocal()
    try:
        db.add_all(users)
        db.add(Article(id="2000000000000000001", title="Hello Ledger", permalink="/article/2000000000000000001"))
        db.add(Comment(id="3000000000000000001", on_article_id="2000000000000000001"))
        db.add(Reward(id="4000000000000000001", sender_id=bob.id, data_id="2000000000000000001"))

        balances = {user.id: 0 for user in users}
        balances[POOL_ID] = 0
        for seq, (transfer_type, from_id, to_id, amount, data_id) in enumerate(movements, start=1):
            balances[from_id] -= amount
            balances[to_id] += amount
            created = now + seq
            db.add(
                PointTransfer(
                    id=str(created),
                    from_id=from_id,
                    to_id=to_id,
                    type=int(transfer_type),
                    sum=amount,
                    from_balance=balances[from_id],
                    to_balance=balances[to_id],
                    data_id=data_id,
                    time=created,
                )
            )

        db.commit()
        print(f"✅ 원장 시드 데이터 생성 완료: 사용자 {len(users)}명, 이체 {len(movements)}건")

    except Exception as e:
        db.rollback()
        print(f"❌ 원장 시드 데이터 생성 실패: {str(e)}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_ledger_data()

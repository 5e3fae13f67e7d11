"""Direction and localization-key helpers shared by the point queries."""

from pointapi.core.exceptions import TransferInvariantError
from pointapi.schemas.points import TransferDirection, TransferRecord, TransferType

# 보는 쪽에 따라 문장이 달라지는 유형 - 수령자 관점에서 "In" 키를 쓴다
_INCOMING_SUFFIXED_TYPES = frozenset(
    {TransferType.ADD_COMMENT, TransferType.ARTICLE_REWARD}
)


def classify_direction(record: TransferRecord, user_id: str) -> TransferDirection:
    """조회 사용자 기준 이체 방향 판별 (지급자 우선)"""
    if user_id == record.from_id:
        return TransferDirection.OUTGOING
    if user_id == record.to_id:
        return TransferDirection.INCOMING
    raise TransferInvariantError(record.id, user_id)


def type_key(record_type: int, direction: TransferDirection) -> str:
    key = str(int(record_type))
    if direction == TransferDirection.INCOMING and record_type in _INCOMING_SUFFIXED_TYPES:
        key += "In"
    return key


def sign_of(direction: TransferDirection) -> str:
    return "-" if direction == TransferDirection.OUTGOING else "+"


def balance_after(record: TransferRecord, direction: TransferDirection) -> int:
    if direction == TransferDirection.OUTGOING:
        return record.from_balance
    return record.to_balance


def label_key(key: str) -> str:
    return f"pointType{key}Label"


def description_key(key: str) -> str:
    return f"pointType{key}DesLabel"

"""
포인트 이체 내역 가공 엔진

저장된 이체 레코드를 조회 사용자 관점의 표시용 레코드로 변환합니다:
1. 방향(지급/수령), 부호, 이체 후 잔액 결정
2. 유형 라벨과 설명 템플릿 현지화
3. 템플릿의 {point}/{article}/{user}를 참조 엔티티 링크로 치환

참조 엔티티가 없으면 빈 링크로 대체하고 나머지 레코드 처리는 계속합니다.
원장에는 어떤 쓰기도 하지 않습니다.
"""

import logging
from datetime import datetime, timezone
from html import escape
from typing import Callable, Dict, List, Optional

from pointapi.schemas.entities import Article, User
from pointapi.schemas.points import (
    DisplayRecord,
    TransferDirection,
    TransferRecord,
    TransferType,
)
from pointapi.services.resolvers import (
    ArticleResolver,
    CommentResolver,
    Localizer,
    RewardResolver,
    UserResolver,
)
from pointapi.services.transfer_types import (
    balance_after,
    classify_direction,
    description_key,
    label_key,
    sign_of,
    type_key,
)

logger = logging.getLogger(__name__)

DescriptionResolver = Callable[[str, TransferRecord, TransferDirection], str]


class LedgerEnricher:
    """이체 레코드 → 표시용 레코드 변환기"""

    def __init__(
        self,
        article_resolver: ArticleResolver,
        comment_resolver: CommentResolver,
        reward_resolver: RewardResolver,
        user_resolver: UserResolver,
        localizer: Localizer,
        member_path: str = "/member/",
    ):
        self.article_resolver = article_resolver
        self.comment_resolver = comment_resolver
        self.reward_resolver = reward_resolver
        self.user_resolver = user_resolver
        self.localizer = localizer
        self.member_path = member_path

        self._description_resolvers: Dict[TransferType, DescriptionResolver] = {
            TransferType.INIT: self._resolve_init,
            TransferType.ADD_ARTICLE: self._resolve_article,
            TransferType.UPDATE_ARTICLE: self._resolve_article,
            TransferType.ADD_COMMENT: self._resolve_comment,
            TransferType.ADD_ARTICLE_REWARD: self._resolve_article,
            TransferType.ARTICLE_REWARD: self._resolve_article_reward,
            TransferType.INVITE_REGISTER: self._resolve_user,
            TransferType.INVITED_REGISTER: self._resolve_user,
            TransferType.ACTIVITY_CHECKIN: self._resolve_verbatim,
        }

    def enrich_all(
        self, records: List[TransferRecord], user_id: str, locale: Optional[str] = None
    ) -> List[DisplayRecord]:
        return [self.enrich(record, user_id, locale) for record in records]

    def enrich(
        self, record: TransferRecord, user_id: str, locale: Optional[str] = None
    ) -> DisplayRecord:
        """
        단일 이체 레코드 가공

        Args:
            record: 원장 레코드
            user_id: 조회 사용자 ID (record의 지급자 또는 수령자여야 함)
            locale: 현지화 로케일 (None이면 기본 로케일)

        Raises:
            TransferInvariantError: user_id가 지급자도 수령자도 아닌 경우
        """
        direction = classify_direction(record, user_id)
        key = type_key(record.type, direction)

        display_type = self.localizer.get(label_key(key), locale)
        template = self.localizer.get(description_key(key), locale)

        return DisplayRecord(
            **record.model_dump(),
            direction=direction,
            sign=sign_of(direction),
            balance_after=balance_after(record, direction),
            display_type=display_type,
            description=self.describe(template, record, direction),
            create_time=datetime.fromtimestamp(record.time / 1000, tz=timezone.utc),
        )

    def describe(
        self, template: str, record: TransferRecord, direction: TransferDirection
    ) -> str:
        # 방향과 무관하게 원래 유형으로 분기 (참조 엔티티는 같다)
        try:
            transfer_type = TransferType(record.type)
        except ValueError:
            logger.warning(
                f"Invalid point type [{record.type}] on transfer {record.id}"
            )
            return template

        return self._description_resolvers[transfer_type](template, record, direction)

    # ------------------------------------------------------------------
    # 유형별 치환
    # ------------------------------------------------------------------

    def _resolve_init(
        self, template: str, record: TransferRecord, direction: TransferDirection
    ) -> str:
        return template.replace("{point}", str(record.sum))

    def _resolve_article(
        self, template: str, record: TransferRecord, direction: TransferDirection
    ) -> str:
        article = self._fetch_article(record.data_id, record)
        return template.replace("{article}", self.article_link(article))

    def _resolve_comment(
        self, template: str, record: TransferRecord, direction: TransferDirection
    ) -> str:
        comment = self.comment_resolver.get_by_id(record.data_id)
        if comment is None:
            logger.warning(
                f"Comment [{record.data_id}] referenced by transfer {record.id} not found"
            )
            article = None
        else:
            article = self._fetch_article(comment.on_article_id, record)
        description = template.replace("{article}", self.article_link(article))

        if direction == TransferDirection.INCOMING:
            commenter = self._fetch_user(record.from_id, record)
            return description.replace("{user}", self.user_link(commenter))
        # 댓글 작성자 본인 관점에서는 {user}가 해당 없음
        return description.replace("{user}", "")

    def _resolve_article_reward(
        self, template: str, record: TransferRecord, direction: TransferDirection
    ) -> str:
        reward = self.reward_resolver.get_by_id(record.data_id)
        if reward is None:
            logger.warning(
                f"Reward [{record.data_id}] referenced by transfer {record.id} not found"
            )

        # 수령자 관점에서는 저장된 후원자 대신 수령자(to_id)를 표시
        if direction == TransferDirection.INCOMING:
            sender = self._fetch_user(record.to_id, record)
        elif reward is not None:
            sender = self._fetch_user(reward.sender_id, record)
        else:
            sender = None
        description = template.replace("{user}", self.user_link(sender))

        article = (
            self._fetch_article(reward.data_id, record) if reward is not None else None
        )
        return description.replace("{article}", self.article_link(article))

    def _resolve_user(
        self, template: str, record: TransferRecord, direction: TransferDirection
    ) -> str:
        # 초대(6)는 가입한 사용자, 초대 가입(7)은 초대한 사용자
        user = self._fetch_user(record.data_id, record)
        return template.replace("{user}", self.user_link(user))

    def _resolve_verbatim(
        self, template: str, record: TransferRecord, direction: TransferDirection
    ) -> str:
        return template

    # ------------------------------------------------------------------
    # 엔티티 조회 및 링크
    # ------------------------------------------------------------------

    def _fetch_article(self, article_id: str, record: TransferRecord) -> Optional[Article]:
        article = self.article_resolver.get_by_id(article_id)
        if article is None:
            logger.warning(
                f"Article [{article_id}] referenced by transfer {record.id} not found"
            )
        return article

    def _fetch_user(self, user_id: str, record: TransferRecord) -> Optional[User]:
        user = self.user_resolver.get_by_id(user_id)
        if user is None:
            logger.warning(
                f"User [{user_id}] referenced by transfer {record.id} not found"
            )
        return user

    @staticmethod
    def article_link(article: Optional[Article]) -> str:
        permalink = article.permalink if article is not None else ""
        title = article.title if article is not None else ""
        return f'<a href="{escape(permalink)}">{escape(title)}</a>'

    def user_link(self, user: Optional[User]) -> str:
        user_name = escape(user.user_name) if user is not None else ""
        return f'<a href="{self.member_path}{user_name}">{user_name}</a>'

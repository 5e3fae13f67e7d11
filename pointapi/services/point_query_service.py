import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from pointapi.config import Settings
from pointapi.core.exceptions import QueryFailure, ValidationError
from pointapi.i18n import LangPropsService
from pointapi.models.user import UserAppRole
from pointapi.repositories.article_repository import ArticleRepository, CommentRepository
from pointapi.repositories.points_repository import PointsRepository, TransferFilter
from pointapi.repositories.rewards_repository import RewardsRepository
from pointapi.repositories.user_repository import UserRepository
from pointapi.schemas.points import PointTransferPage, TransferRecord, UserSummary
from pointapi.services.ledger_enrichment import LedgerEnricher
from pointapi.utils.formatting import to_compact_string, to_hex_string

logger = logging.getLogger(__name__)


class PointQueryService:
    """포인트 이체 내역/순위 조회 서비스 (읽기 전용)"""

    def __init__(self, db: Session, settings: Settings, lang_service: LangPropsService):
        self.db = db
        self.settings = settings
        self.lang_service = lang_service
        self.points_repo = PointsRepository(db)
        self.user_repo = UserRepository(db)
        self.enricher = LedgerEnricher(
            article_resolver=ArticleRepository(db),
            comment_resolver=CommentRepository(db),
            reward_resolver=RewardsRepository(db),
            user_resolver=self.user_repo,
            localizer=lang_service,
            member_path=settings.MEMBER_PATH,
        )

    @contextmanager
    def _read_transaction(self) -> Iterator[None]:
        """조회 한 번이 연 트랜잭션을 호출 종료 시 닫는다 (실패 후에도 세션 재사용 가능)"""
        try:
            yield
        finally:
            self.db.rollback()

    def enrich_page(
        self,
        user_id: str,
        page_num: int,
        page_size: int,
        locale: Optional[str] = None,
    ) -> PointTransferPage:
        """사용자 포인트 이체 내역 한 페이지 조회

        Args:
            user_id: 사용자 ID
            page_num: 페이지 번호 (1부터)
            page_size: 페이지 크기
            locale: 설명 현지화 로케일

        Returns:
            PointTransferPage: 최신순 표시용 레코드와 전체 건수

        Raises:
            ValidationError: 페이지 파라미터가 잘못된 경우
            QueryFailure: 원장 조회에 실패한 경우
        """
        if page_num < 1 or page_size < 1:
            raise ValidationError(
                "Page number and page size must be positive",
                details={"page_num": page_num, "page_size": page_size},
            )

        with self._read_transaction():
            try:
                records, total_count = self.points_repo.query(
                    TransferFilter.involving(user_id), page_num=page_num, page_size=page_size
                )
            except Exception as e:
                logger.error(f"Gets user points failed for user {user_id}: {str(e)}")
                raise QueryFailure(f"Failed to retrieve point transfers: {str(e)}") from e

            try:
                items = self.enricher.enrich_all(records, user_id, locale)
            except SQLAlchemyError as e:
                logger.error(f"Resolving point transfer references failed for user {user_id}: {str(e)}")
                raise QueryFailure(f"Failed to resolve point transfers: {str(e)}") from e

        logger.info(
            f"Retrieved {len(items)}/{total_count} point transfers for user {user_id} (page {page_num})"
        )
        return PointTransferPage(total_count=total_count, items=items)

    def latest(self, user_id: str, type: int, fetch_size: int) -> List[TransferRecord]:
        """사용자가 받은 특정 유형의 최근 이체 (실패 시 빈 목록)"""
        try:
            with self._read_transaction():
                return self.points_repo.get_latest(user_id, type, fetch_size)
        except Exception as e:
            logger.error(f"Gets latest pointtransfers error for user {user_id}: {str(e)}")
            return []

    def top_balances(self, fetch_size: int, locale: Optional[str] = None) -> List[UserSummary]:
        """잔액 상위 사용자 조회 (실패 시 빈 목록)

        초기 지급 + 초대 가입 보너스 이하인 사용자는 거래 이력이 없는 계정으로 보고 제외한다.
        """
        floor = self.settings.POINT_INIT_GRANT + self.settings.POINT_INVITE_REGISTER_GRANT
        locale = locale or self.settings.DEFAULT_LOCALE

        try:
            with self._read_transaction():
                users = self.user_repo.get_top_balance_users(fetch_size)
        except Exception as e:
            logger.error(f"Gets top balance users error: {str(e)}")
            return []

        ret = []
        for user in users:
            if user.point <= floor:
                continue

            summary = UserSummary.model_validate(user.model_dump())
            if user.app_role == UserAppRole.HACKER:
                summary.point_hex = to_hex_string(user.point)
            else:
                summary.point_cc = to_compact_string(user.point, locale)
            ret.append(summary)

        return ret

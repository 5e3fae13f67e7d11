"""
포인트 이체 조회 API 라우터

- GET /points/{user_id}/transfers: 사용자 포인트 이체 내역 (페이지)
- GET /points/{user_id}/latest: 사용자가 받은 특정 유형의 최근 이체
- GET /points/top: 잔액 상위 사용자
"""

from typing import List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Header, Path, Query

from pointapi.containers import Container
from pointapi.i18n import normalize_locale
from pointapi.schemas.pagination import PaginationLimits
from pointapi.schemas.points import PointTransferPage, TransferRecord, UserSummary
from pointapi.services.point_query_service import PointQueryService

router = APIRouter(prefix="/points", tags=["points"])


def get_locale(accept_language: Optional[str] = Header(None)) -> Optional[str]:
    """Accept-Language 헤더에서 로케일 결정 (없으면 서비스 기본값)"""
    if not accept_language:
        return None
    return normalize_locale(accept_language)


@router.get("/top", response_model=List[UserSummary])
@inject
async def get_top_balance_users(
    size: int = Query(
        PaginationLimits.TOP_BALANCE["default"],
        ge=PaginationLimits.TOP_BALANCE["min"],
        le=PaginationLimits.TOP_BALANCE["max"],
        description="조회할 사용자 수",
    ),
    locale: Optional[str] = Depends(get_locale),
    point_service: PointQueryService = Depends(Provide[Container.services.point_query_service]),
) -> List[UserSummary]:
    """
    잔액 상위 사용자 조회

    초기 지급 포인트만 가진 계정은 제외됩니다. 조회 실패 시 빈 목록을 반환합니다.
    """
    return point_service.top_balances(size, locale)


@router.get("/{user_id}/transfers", response_model=PointTransferPage)
@inject
async def get_user_transfers(
    user_id: str = Path(..., min_length=1, description="사용자 ID"),
    p: int = Query(1, ge=1, description="페이지 번호"),
    size: int = Query(
        PaginationLimits.POINTS_LEDGER["default"],
        ge=PaginationLimits.POINTS_LEDGER["min"],
        le=PaginationLimits.POINTS_LEDGER["max"],
        description="페이지 크기",
    ),
    locale: Optional[str] = Depends(get_locale),
    point_service: PointQueryService = Depends(Provide[Container.services.point_query_service]),
) -> PointTransferPage:
    """
    사용자 포인트 이체 내역 조회

    Returns:
        PointTransferPage: 최신순 이체 내역과 전체 건수
        - total_count: 전체 이체 건수 (페이지 크기와 무관)
        - items: 방향/부호/이체 후 잔액/현지화 설명이 채워진 레코드

    HTTP Status:
        200: 성공
        422: 잘못된 페이지 파라미터
        503: 원장 조회 실패
    """
    return point_service.enrich_page(user_id, p, size, locale)


@router.get("/{user_id}/latest", response_model=List[TransferRecord])
@inject
async def get_latest_transfers(
    user_id: str = Path(..., min_length=1, description="사용자 ID"),
    type: int = Query(..., ge=0, description="이체 유형"),
    size: int = Query(
        PaginationLimits.POINTS_LATEST["default"],
        ge=PaginationLimits.POINTS_LATEST["min"],
        le=PaginationLimits.POINTS_LATEST["max"],
        description="조회 건수",
    ),
    point_service: PointQueryService = Depends(Provide[Container.services.point_query_service]),
) -> List[TransferRecord]:
    """사용자가 받은 특정 유형의 최근 이체 (조회 실패 시 빈 목록)"""
    return point_service.latest(user_id, type, size)

# 엔드포인트별 페이지네이션 제한
class PaginationLimits:
    POINTS_LEDGER = {"min": 1, "max": 100, "default": 20}
    POINTS_LATEST = {"min": 1, "max": 50, "default": 10}
    TOP_BALANCE = {"min": 1, "max": 100, "default": 10}

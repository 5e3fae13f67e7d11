from __future__ import annotations

from typing import Dict, Optional


def normalize_locale(code: str | None, default: str = "en_US") -> str:
    """
    Accept-Language 값(ko-KR, zh-CN;q=0.9 등)을 지원하는 로케일 키로 정규화
    """
    if not code:
        return default

    code = code.split(",")[0].split(";")[0].strip().lower()

    if code.startswith("ko"):
        return "ko_KR"
    if code.startswith("zh"):
        return "zh_CN"
    if code.startswith("en"):
        return "en_US"

    return default


# === 로케일별 문자열 테이블 ===
# 설명 템플릿의 {point}, {article}, {user}는 조회 시 치환된다
LANG_DATA: Dict[str, Dict[str, str]] = {
    "en_US": {
        "pointType0Label": "Initial",
        "pointType0DesLabel": "Received {point} initial points on registration",
        "pointType1Label": "Post",
        "pointType1DesLabel": "Posted article {article}",
        "pointType2Label": "Update",
        "pointType2DesLabel": "Updated article {article}",
        "pointType3Label": "Comment",
        "pointType3DesLabel": "Commented on article {article}",
        "pointType3InLabel": "Commented",
        "pointType3InDesLabel": "{user} commented on your article {article}",
        "pointType4Label": "Reward Setting",
        "pointType4DesLabel": "Set up a reward on article {article}",
        "pointType5Label": "Reward",
        "pointType5DesLabel": "{user} rewarded article {article}",
        "pointType5InLabel": "Rewarded",
        "pointType5InDesLabel": "{user} received a reward for article {article}",
        "pointType6Label": "Invite",
        "pointType6DesLabel": "Invited {user} to register",
        "pointType7Label": "Invited",
        "pointType7DesLabel": "Registered with an invitation from {user}",
        "pointType8Label": "Check-in",
        "pointType8DesLabel": "Daily check-in reward",
    },
    "zh_CN": {
        "pointType0Label": "初始",
        "pointType0DesLabel": "注册时获得初始积分 {point}",
        "pointType1Label": "发帖",
        "pointType1DesLabel": "发布了帖子 {article}",
        "pointType2Label": "更新",
        "pointType2DesLabel": "更新了帖子 {article}",
        "pointType3Label": "评论",
        "pointType3DesLabel": "评论了帖子 {article}",
        "pointType3InLabel": "被评论",
        "pointType3InDesLabel": "{user} 评论了你的帖子 {article}",
        "pointType4Label": "打赏设置",
        "pointType4DesLabel": "为帖子 {article} 设置了打赏",
        "pointType5Label": "打赏",
        "pointType5DesLabel": "{user} 打赏了帖子 {article}",
        "pointType5InLabel": "被打赏",
        "pointType5InDesLabel": "{user} 的帖子 {article} 收到了打赏",
        "pointType6Label": "邀请",
        "pointType6DesLabel": "邀请 {user} 注册",
        "pointType7Label": "受邀",
        "pointType7DesLabel": "接受 {user} 的邀请注册",
        "pointType8Label": "签到",
        "pointType8DesLabel": "每日签到奖励",
    },
    "ko_KR": {
        "pointType0Label": "초기 지급",
        "pointType0DesLabel": "가입 시 초기 포인트 {point} 지급",
        "pointType1Label": "글 작성",
        "pointType1DesLabel": "글 {article} 작성",
        "pointType2Label": "글 수정",
        "pointType2DesLabel": "글 {article} 수정",
        "pointType3Label": "댓글",
        "pointType3DesLabel": "글 {article}에 댓글 작성",
        "pointType3InLabel": "댓글 받음",
        "pointType3InDesLabel": "{user}님이 내 글 {article}에 댓글 작성",
        "pointType4Label": "후원 설정",
        "pointType4DesLabel": "글 {article}에 후원 설정",
        "pointType5Label": "후원",
        "pointType5DesLabel": "{user}님이 글 {article} 후원",
        "pointType5InLabel": "후원 받음",
        "pointType5InDesLabel": "{user}님의 글 {article} 후원 받음",
        "pointType6Label": "초대",
        "pointType6DesLabel": "{user}님 가입 초대",
        "pointType7Label": "초대 가입",
        "pointType7DesLabel": "{user}님의 초대로 가입",
        "pointType8Label": "출석 체크",
        "pointType8DesLabel": "출석 체크 보상",
    },
}


class LangPropsService:
    """
    로케일별 문자열 조회 서비스 (읽기 전용)

    요청 로케일 → 기본 로케일 → 키 자체 순서로 대체하며 예외를 던지지 않는다.
    """

    def __init__(
        self,
        default_locale: str = "en_US",
        tables: Optional[Dict[str, Dict[str, str]]] = None,
    ):
        self.default_locale = default_locale
        self.tables = tables if tables is not None else LANG_DATA

    def get(self, key: str, locale: Optional[str] = None) -> str:
        for candidate in (locale, self.default_locale):
            if candidate and key in self.tables.get(candidate, {}):
                return self.tables[candidate][key]
        return key

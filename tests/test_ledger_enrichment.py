import logging
from datetime import datetime, timezone

import pytest

from fakes import DictResolver, TableLocalizer
from pointapi.core.exceptions import TransferInvariantError
from pointapi.schemas.entities import Article, Comment, Reward, User
from pointapi.schemas.points import TransferDirection, TransferRecord, TransferType
from pointapi.services.ledger_enrichment import LedgerEnricher

ALICE = "1000000000000000001"  # 글 작성자
BOB = "1000000000000000002"  # 댓글 작성자 / 후원자
POOL = "0"

LANG = {
    "pointType0Label": "Initial",
    "pointType0DesLabel": "Initial grant {point}",
    "pointType1Label": "Post",
    "pointType1DesLabel": "Posted {article}",
    "pointType2DesLabel": "Updated {article}",
    "pointType3Label": "Comment",
    "pointType3DesLabel": "Commented on {article}",
    "pointType3InLabel": "Commented",
    "pointType3InDesLabel": "{user} commented on {article}",
    "pointType4DesLabel": "Reward set on {article}",
    "pointType5Label": "Reward",
    "pointType5DesLabel": "{user} rewarded {article}",
    "pointType5InLabel": "Rewarded",
    "pointType5InDesLabel": "{user} received a reward for {article}",
    "pointType6DesLabel": "Invited {user}",
    "pointType7DesLabel": "Invited by {user}",
    "pointType8Label": "Check-in",
    "pointType8DesLabel": "Daily check-in",
}


def make_record(**overrides) -> TransferRecord:
    data = {
        "id": "1700000000001",
        "from_id": POOL,
        "to_id": ALICE,
        "type": TransferType.INIT,
        "sum": 100,
        "from_balance": 0,
        "to_balance": 100,
        "data_id": "",
        "time": 1700000000000,
    }
    data.update(overrides)
    return TransferRecord(**data)


@pytest.fixture
def articles():
    return DictResolver(
        {"a1": Article(id="a1", title="Hello", permalink="/article/a1")}
    )


@pytest.fixture
def comments():
    return DictResolver({"c1": Comment(id="c1", on_article_id="a1")})


@pytest.fixture
def rewards():
    return DictResolver({"r1": Reward(id="r1", sender_id=BOB, data_id="a1")})


@pytest.fixture
def users():
    return DictResolver(
        {
            ALICE: User(id=ALICE, user_name="alice", point=2000),
            BOB: User(id=BOB, user_name="bob", point=1500),
        }
    )


@pytest.fixture
def enricher(articles, comments, rewards, users):
    return LedgerEnricher(
        article_resolver=articles,
        comment_resolver=comments,
        reward_resolver=rewards,
        user_resolver=users,
        localizer=TableLocalizer(LANG),
    )


class TestDirection:
    """방향/부호/잔액 결정 테스트"""

    def test_outgoing_uses_from_balance(self, enricher):
        record = make_record(
            from_id=BOB, to_id=ALICE, type=TransferType.ARTICLE_REWARD,
            data_id="r1", from_balance=900, to_balance=1100,
        )

        result = enricher.enrich(record, BOB)

        assert result.direction == TransferDirection.OUTGOING
        assert result.sign == "-"
        assert result.balance_after == 900

    def test_incoming_uses_to_balance(self, enricher):
        record = make_record(from_balance=0, to_balance=100)

        result = enricher.enrich(record, ALICE)

        assert result.direction == TransferDirection.INCOMING
        assert result.sign == "+"
        assert result.balance_after == 100

    def test_unrelated_user_is_invariant_violation(self, enricher):
        with pytest.raises(TransferInvariantError):
            enricher.enrich(make_record(), BOB)

    def test_create_time_from_epoch_millis(self, enricher):
        result = enricher.enrich(make_record(time=1700000000000), ALICE)

        assert result.create_time == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)

    def test_stored_fields_are_carried_over(self, enricher):
        record = make_record()

        result = enricher.enrich(record, ALICE)

        assert result.id == record.id
        assert result.sum == record.sum
        assert result.type == record.type


class TestDescriptions:
    """유형별 설명 치환 테스트"""

    def test_init_substitutes_point(self, enricher):
        result = enricher.enrich(make_record(sum=100), ALICE)

        assert result.display_type == "Initial"
        assert result.description == "Initial grant 100"
        assert "{" not in result.description

    @pytest.mark.parametrize(
        "transfer_type,expected",
        [
            (TransferType.ADD_ARTICLE, 'Posted <a href="/article/a1">Hello</a>'),
            (TransferType.UPDATE_ARTICLE, 'Updated <a href="/article/a1">Hello</a>'),
            (TransferType.ADD_ARTICLE_REWARD, 'Reward set on <a href="/article/a1">Hello</a>'),
        ],
    )
    def test_article_types_link_article(self, enricher, transfer_type, expected):
        record = make_record(from_id=ALICE, to_id=POOL, type=transfer_type, data_id="a1")

        result = enricher.enrich(record, ALICE)

        assert result.description == expected

    def test_comment_outgoing_has_article_without_user(self, enricher, users):
        record = make_record(from_id=BOB, to_id=ALICE, type=TransferType.ADD_COMMENT, data_id="c1")

        result = enricher.enrich(record, BOB)

        assert result.display_type == "Comment"
        assert result.description == 'Commented on <a href="/article/a1">Hello</a>'
        assert "{user}" not in result.description
        assert users.calls == []

    def test_comment_incoming_links_commenter(self, enricher):
        record = make_record(from_id=BOB, to_id=ALICE, type=TransferType.ADD_COMMENT, data_id="c1")

        result = enricher.enrich(record, ALICE)

        assert result.display_type == "Commented"
        assert result.description == (
            '<a href="/member/bob">bob</a> commented on <a href="/article/a1">Hello</a>'
        )

    def test_article_reward_outgoing_uses_stored_sender(self, enricher):
        record = make_record(from_id=BOB, to_id=ALICE, type=TransferType.ARTICLE_REWARD, data_id="r1")

        result = enricher.enrich(record, BOB)

        assert result.description == (
            '<a href="/member/bob">bob</a> rewarded <a href="/article/a1">Hello</a>'
        )

    def test_article_reward_incoming_shows_recipient_not_stored_sender(self, enricher, users):
        record = make_record(from_id=BOB, to_id=ALICE, type=TransferType.ARTICLE_REWARD, data_id="r1")

        result = enricher.enrich(record, ALICE)

        assert result.display_type == "Rewarded"
        assert result.description == (
            '<a href="/member/alice">alice</a> received a reward for <a href="/article/a1">Hello</a>'
        )
        assert BOB not in users.calls

    def test_invite_register_links_invitee(self, enricher):
        record = make_record(type=TransferType.INVITE_REGISTER, data_id=BOB)

        result = enricher.enrich(record, ALICE)

        assert result.description == 'Invited <a href="/member/bob">bob</a>'

    def test_invited_register_links_referrer(self, enricher):
        record = make_record(to_id=BOB, type=TransferType.INVITED_REGISTER, data_id=ALICE)

        result = enricher.enrich(record, BOB)

        assert result.description == 'Invited by <a href="/member/alice">alice</a>'

    def test_checkin_is_verbatim(self, enricher):
        record = make_record(type=TransferType.ACTIVITY_CHECKIN)

        result = enricher.enrich(record, ALICE)

        assert result.display_type == "Check-in"
        assert result.description == "Daily check-in"

    def test_unknown_type_keeps_template(self, articles, comments, rewards, users, caplog):
        localizer = TableLocalizer({"pointType42DesLabel": "Mystery {article}"})
        enricher = LedgerEnricher(articles, comments, rewards, users, localizer)

        with caplog.at_level(logging.WARNING, logger="pointapi.services.ledger_enrichment"):
            result = enricher.enrich(make_record(type=42, data_id="a1"), ALICE)

        assert result.description == "Mystery {article}"
        assert result.display_type == "pointType42Label"
        assert articles.calls == []
        assert "Invalid point type [42]" in caplog.text

    def test_member_path_is_configurable(self, articles, comments, rewards, users):
        enricher = LedgerEnricher(
            articles, comments, rewards, users, TableLocalizer(LANG), member_path="/u/"
        )
        record = make_record(type=TransferType.INVITE_REGISTER, data_id=BOB)

        assert enricher.enrich(record, ALICE).description == 'Invited <a href="/u/bob">bob</a>'

    def test_link_text_is_html_escaped(self, comments, rewards, users):
        articles = DictResolver(
            {"a1": Article(id="a1", title="<b>Tom & Jerry</b>", permalink="/article/a1")}
        )
        enricher = LedgerEnricher(articles, comments, rewards, users, TableLocalizer(LANG))
        record = make_record(from_id=ALICE, to_id=POOL, type=TransferType.ADD_ARTICLE, data_id="a1")

        result = enricher.enrich(record, ALICE)

        assert result.description == (
            'Posted <a href="/article/a1">&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;</a>'
        )


class TestMissingReferences:
    """참조 엔티티 누락 시 빈 링크로 대체"""

    def test_missing_article_degrades_to_empty_anchor(self, enricher, caplog):
        record = make_record(from_id=ALICE, to_id=POOL, type=TransferType.ADD_ARTICLE, data_id="gone")

        with caplog.at_level(logging.WARNING, logger="pointapi.services.ledger_enrichment"):
            result = enricher.enrich(record, ALICE)

        assert result.description == 'Posted <a href=""></a>'
        assert caplog.text.count("Article [gone]") == 1

    def test_missing_comment_degrades_article(self, enricher):
        record = make_record(from_id=BOB, to_id=ALICE, type=TransferType.ADD_COMMENT, data_id="gone")

        result = enricher.enrich(record, ALICE)

        assert result.description == '<a href="/member/bob">bob</a> commented on <a href=""></a>'

    def test_missing_reward_degrades_user_and_article(self, enricher):
        record = make_record(from_id=BOB, to_id=ALICE, type=TransferType.ARTICLE_REWARD, data_id="gone")

        result = enricher.enrich(record, BOB)

        assert result.description == '<a href="/member/"></a> rewarded <a href=""></a>'

    def test_missing_reward_incoming_still_shows_recipient(self, enricher):
        record = make_record(from_id=BOB, to_id=ALICE, type=TransferType.ARTICLE_REWARD, data_id="gone")

        result = enricher.enrich(record, ALICE)

        assert result.description == (
            '<a href="/member/alice">alice</a> received a reward for <a href=""></a>'
        )

    def test_missing_user_degrades_to_empty_profile_link(self, enricher):
        record = make_record(type=TransferType.INVITE_REGISTER, data_id="nobody")

        result = enricher.enrich(record, ALICE)

        assert result.description == 'Invited <a href="/member/"></a>'

    def test_bad_reference_does_not_affect_other_records(self, enricher):
        records = [
            make_record(id="1700000000003", from_id=ALICE, to_id=POOL,
                        type=TransferType.ADD_ARTICLE, data_id="gone"),
            make_record(id="1700000000002", from_id=ALICE, to_id=POOL,
                        type=TransferType.ADD_ARTICLE, data_id="a1"),
            make_record(id="1700000000001"),
        ]

        results = enricher.enrich_all(records, ALICE)

        assert [r.id for r in results] == [r.id for r in records]
        assert results[0].description == 'Posted <a href=""></a>'
        assert results[1].description == 'Posted <a href="/article/a1">Hello</a>'
        assert results[2].description == "Initial grant 100"


def test_enrichment_is_repeatable(enricher):
    records = [
        make_record(id="1700000000002", from_id=BOB, to_id=ALICE,
                    type=TransferType.ADD_COMMENT, data_id="c1"),
        make_record(id="1700000000001"),
    ]

    first = enricher.enrich_all(records, ALICE)
    second = enricher.enrich_all(records, ALICE)

    assert [r.model_dump_json() for r in first] == [r.model_dump_json() for r in second]

from sqlalchemy.orm import declarative_base

Base = declarative_base()


class BaseModel(Base):
    """
    조회 대상 엔티티 모델의 베이스 클래스

    테이블은 커뮤니티 서비스가 기록하며 이 서비스는 읽기만 합니다.
    """

    __abstract__ = True

from sqlalchemy import Column, Integer, String, Text

from cms.db.base import Base, TimestampMixin


class PortfolioProject(TimestampMixin, Base):
    __tablename__ = "portfolios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    image = Column(String(2048), nullable=True)
    owner_id = Column(String(64), nullable=True, index=True)

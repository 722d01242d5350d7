from sqlalchemy import Column, Integer, String, Text

from cms.db.base import Base, TimestampMixin


class Blog(TimestampMixin, Base):
    __tablename__ = "blogs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    image_url = Column(String(2048), nullable=True)
    # Непрозрачный идентификатор владельца из токена, без внешнего ключа
    owner_id = Column(String(64), nullable=False, index=True)

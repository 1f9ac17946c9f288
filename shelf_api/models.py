from sqlalchemy import Column, Integer, String, Text, UniqueConstraint

from .db import Base


class Document(Base):
    __tablename__ = "documents"
    __table_args__ = (UniqueConstraint("collection", "key", name="uq_collection_key"),)

    id = Column(Integer, primary_key=True, index=True)
    collection = Column(String(50), index=True, nullable=False)
    key = Column(String(320), nullable=False)  # JSON-encoded key value
    body = Column(Text, nullable=False)  # JSON-encoded document

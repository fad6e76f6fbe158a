import uuid
from sqlalchemy import Column, String, DateTime, func
from flowplanr.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=True)
    password = Column(String, nullable=False)  # plain text (DEV ONLY)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

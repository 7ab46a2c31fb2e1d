import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from app.data.database import Base


def new_id() -> str:
    return str(uuid.uuid4())


class UserModel(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(128), nullable=False)
    name = Column(String(255), nullable=False)
    img = Column(String(1024), nullable=True)

    #optimistic locking, podbijane przy kazdej zmianie koszyka/ulubionych
    version = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    cart = relationship(
        "CartItemModel",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="CartItemModel.id",
    )
    favourites = relationship(
        "FavoriteModel",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="FavoriteModel.id",
    )

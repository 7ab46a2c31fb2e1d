from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from app.data.database import Base


class FavoriteModel(Base):
    __tablename__ = "favourites"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(String(36), nullable=False)

    user = relationship("UserModel", back_populates="favourites")

    __table_args__ = (UniqueConstraint("user_id", "product_id", name="u_fav_user_product"),)

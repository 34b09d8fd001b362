from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class BookingModel(Base):
    __tablename__ = 'booking'

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)
    # References are resolved by the use case at creation time, not by FK constraints
    user_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    movie_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    booking_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    show_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    seats: Mapped[int] = mapped_column(Integer, nullable=False)
    total_price: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='Booked', nullable=False)

    def __repr__(self):
        return f'<BookingModel(id={self.id}, user_id={self.user_id}, movie_id={self.movie_id})>'

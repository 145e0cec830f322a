from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String
from tokengate.core.database import Base

class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True, index=True)
    username: Mapped[str] = mapped_column(String, unique=True, index=True)
    password: Mapped[str] = mapped_column(String)
    phone: Mapped[str] = mapped_column(String)

"""Project (proyek) table."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from devtrack.db.base import Base


class ProyekRow(Base):
    __tablename__ = "proyek"

    id_proyek: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    nama_proyek: Mapped[str] = mapped_column(Text, nullable=False)
    client: Mapped[str] = mapped_column(Text, nullable=False)
    budget: Mapped[int] = mapped_column(Integer, nullable=False)

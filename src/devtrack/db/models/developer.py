"""Developer table."""

from sqlalchemy import ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from devtrack.db.base import Base


class DeveloperRow(Base):
    __tablename__ = "developer"

    id_dev: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # No ON DELETE action: deleting a project never touches its developers here
    id_proyek: Mapped[int] = mapped_column(
        Integer, ForeignKey("proyek.id_proyek"), nullable=False, index=True
    )
    nama_dev: Mapped[str] = mapped_column(Text, nullable=False)
    status_kontrak: Mapped[str] = mapped_column(Text, nullable=False)
    # Stored as text; parsed leniently by Developer.quality_score()
    fitur_selesai: Mapped[str] = mapped_column(Text, nullable=False)
    jumlah_bug: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

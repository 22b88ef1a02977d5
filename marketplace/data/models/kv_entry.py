# marketplace/data/models/kv_entry.py
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, DateTime

from marketplace.data.database import Base


class KvEntryModel(Base):
    __tablename__ = "kv_entries"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

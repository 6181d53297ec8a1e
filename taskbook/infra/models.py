from __future__ import annotations

from sqlalchemy import Column, Integer, Text

from .db import Base


class TaskModel(Base):
    __tablename__ = "tasks"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted newest row.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    due_date = Column(Text, nullable=False)

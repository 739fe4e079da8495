from __future__ import annotations
from datetime import datetime, UTC
from sqlmodel import Field, SQLModel

SNAPSHOT_FORMAT_VERSION = 1

class SnapshotInfo(SQLModel, table=True):
    __tablename__ = "snapshot_info"

    id: int = Field(default=1, primary_key=True)
    format_version: int = SNAPSHOT_FORMAT_VERSION
    saved_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

class AccountRow(SQLModel, table=True):
    __tablename__ = "account"

    name: str = Field(primary_key=True)
    balance: int

class HistoryEntryRow(SQLModel, table=True):
    __tablename__ = "history_entry"

    account_name: str = Field(foreign_key="account.name", primary_key=True)
    position: int = Field(primary_key=True)
    amount: int
    balance: int

# jobboard/models.py
from __future__ import annotations

from sqlalchemy import (
    Column, Integer, String, Text, DateTime, ForeignKey, Index, JSON
)
from sqlalchemy.ext.mutable import MutableList
from sqlalchemy.sql import func as sa_func

from jobboard.database import Base


# =======================
# User model
# =======================
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    # Stored normalized (trimmed + lower-cased), so plain uniqueness is case-insensitive
    email = Column(String(255), unique=True, index=True, nullable=False)
    mobile = Column(String(50), nullable=False)
    password_hash = Column(String(255), nullable=False)

    created_at = Column(DateTime, nullable=False, server_default=sa_func.now())

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"


# =======================
# JobListing model
# =======================
class JobListing(Base):
    __tablename__ = "job_listings"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    company_name    = Column(String(255), nullable=False)
    add_logo_url    = Column(String(2048), nullable=False)
    job_position    = Column(String(255), nullable=False, index=True)
    monthly_salary  = Column(String(100), nullable=False)
    job_type        = Column(String(100), nullable=False)
    remote_onsite   = Column(String(100), nullable=False)
    job_location    = Column(String(255), nullable=False)
    job_description = Column(Text, nullable=False)
    about_company   = Column(Text, nullable=False)
    skills_required = Column(MutableList.as_mutable(JSON), nullable=False, default=list)

    # Who posted it (informational; updates are not restricted to the poster)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), index=True, nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=sa_func.now())
    updated_at = Column(DateTime, nullable=False, server_default=sa_func.now(), onupdate=sa_func.now())

    __table_args__ = (
        Index("ix_job_listings_created", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<JobListing id={self.id} job_position={self.job_position!r}>"

"""
User Database Model

Stores every account in the network: alumni, students, teachers and management.
"""

from sqlalchemy import Column, String, JSON, Integer, Text
from alumni_hub.models.base import Base, TimestampMixin, new_id


class User(Base, TimestampMixin):
    """
    User account table.

    Rows are kept in insertion order through the integer primary key, which is
    the collection order the directory search ranks against.
    """

    __tablename__ = "users"

    # Row order; never exposed
    pk = Column("id", Integer, primary_key=True, autoincrement=True)

    # Public identifier
    id = Column("user_id", String(64), unique=True, nullable=False, index=True, default=new_id)

    # Credentials (plaintext equality check only)
    email = Column(String(320), unique=True, nullable=False, index=True)
    password = Column(String(256), nullable=False)

    name = Column(String(256), nullable=False)

    # 'alumni', 'admin', 'student', 'teacher', 'management'
    role = Column(String(32), nullable=False)
    # 'alumni', 'student', 'teacher', 'management'
    user_type = Column(String(32), nullable=False, index=True)

    graduation_year = Column(Integer, nullable=True)
    enrollment_year = Column(Integer, nullable=True)
    major = Column(String(256), nullable=True)
    branch = Column(String(256), nullable=True)
    department = Column(String(256), nullable=True)
    company = Column(String(256), nullable=True)
    position = Column(String(256), nullable=True)
    phone = Column(String(64), nullable=True)
    bio = Column(Text, nullable=True)
    college = Column(String(256), nullable=True)
    location = Column(String(256), nullable=True)
    skills = Column(JSON, nullable=True)
    experience = Column(String(128), nullable=True)

    def __repr__(self):
        return f"<User(id='{self.id}', email='{self.email}', user_type='{self.user_type}')>"

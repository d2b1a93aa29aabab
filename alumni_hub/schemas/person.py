"""
Person Pydantic Schemas
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from alumni_hub.schemas.base import CamelModel


class UserType(str, Enum):
    """Closed set of member categories"""

    ALUMNI = "alumni"
    STUDENT = "student"
    TEACHER = "teacher"
    MANAGEMENT = "management"


class UserRole(str, Enum):
    """Permission role; management accounts are admins"""

    ALUMNI = "alumni"
    ADMIN = "admin"
    STUDENT = "student"
    TEACHER = "teacher"
    MANAGEMENT = "management"


class Person(CamelModel):
    """
    A searchable member of the network.

    Only ``id`` and ``name`` are mandatory here: required-field rules for new
    accounts are enforced by ``SignupRequest`` where the input enters.
    """

    id: str
    name: str = Field(..., min_length=1)
    email: str = ""
    user_type: Optional[UserType] = None
    role: Optional[UserRole] = None

    major: Optional[str] = None
    branch: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None
    college: Optional[str] = None
    location: Optional[str] = None
    department: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[List[str]] = None
    graduation_year: Optional[int] = None

    enrollment_year: Optional[int] = None
    phone: Optional[str] = None
    experience: Optional[str] = None
    created_at: Optional[datetime] = None


class SignupRequest(CamelModel):
    """Request schema for account registration"""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)
    user_type: UserType

    major: Optional[str] = None
    branch: Optional[str] = None
    department: Optional[str] = None
    college: Optional[str] = None
    graduation_year: Optional[int] = None
    enrollment_year: Optional[int] = None


class LoginRequest(CamelModel):
    """Request schema for login"""

    email: str
    password: str


class ProfileUpdate(CamelModel):
    """Editable profile fields; omitted fields are left untouched"""

    name: Optional[str] = Field(None, min_length=1)
    user_type: Optional[UserType] = None
    major: Optional[str] = None
    branch: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None
    college: Optional[str] = None
    location: Optional[str] = None
    department: Optional[str] = None
    bio: Optional[str] = None
    skills: Optional[List[str]] = None
    graduation_year: Optional[int] = None
    enrollment_year: Optional[int] = None
    phone: Optional[str] = None
    experience: Optional[str] = None

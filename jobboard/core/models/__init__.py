from .company import CompanyStore
from .job import JobStore
from .user import UserStore

__all__ = ["CompanyStore", "JobStore", "UserStore"]

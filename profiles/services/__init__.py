from .profile import ProfileService, ProfileViewModel
from .repository import CustomerRepository

__all__ = ["CustomerRepository", "ProfileService", "ProfileViewModel"]

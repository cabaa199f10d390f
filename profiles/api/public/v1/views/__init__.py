from .password import PasswordUpdateView
from .profile import ProfileView

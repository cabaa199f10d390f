from .address import AddressInputSerializer, AddressSerializer, \
    CountrySerializer
from .password import PasswordUpdateSerializer
from .profile import (
    CustomerSerializer,
    ProfileUpdateSerializer,
    ProfileViewSerializer,
    UserSummarySerializer,
)

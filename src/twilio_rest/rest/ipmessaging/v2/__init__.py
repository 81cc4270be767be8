from __future__ import annotations
from .service import (
    Service, ServiceCreator, ServiceDeleter, ServiceFetcher, ServiceReader, ServiceUpdater,
)
from .user import User, UserCreator, UserDeleter, UserFetcher, UserReader, UserUpdater
from .user_binding import (
    BindingType, UserBinding, UserBindingDeleter, UserBindingFetcher, UserBindingReader,
)

__all__ = [
    "Service", "ServiceCreator", "ServiceDeleter", "ServiceFetcher", "ServiceReader", "ServiceUpdater",
    "User", "UserCreator", "UserDeleter", "UserFetcher", "UserReader", "UserUpdater",
    "BindingType", "UserBinding", "UserBindingDeleter", "UserBindingFetcher", "UserBindingReader",
]

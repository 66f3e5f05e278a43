"""Async client for the Vend retail API."""

from .client import Client
from .collection import Collection
from .repository import Repository
from .request import HTTPError, Unauthorized
from .resource import IllegalAction, InvalidResponse, Resource, \
    ResourceError, ResourceType
from .resources import Customer, Outlet, PaymentType, Product, Register, \
    RegisterSale, Tax, User

__all__ = (
    'Client',
    'Collection',
    'Repository',
    'Resource',
    'ResourceType',
    'ResourceError',
    'InvalidResponse',
    'IllegalAction',
    'HTTPError',
    'Unauthorized',
    'Customer',
    'Outlet',
    'PaymentType',
    'Product',
    'Register',
    'RegisterSale',
    'Tax',
    'User',
)

__version__ = '0.1.0'

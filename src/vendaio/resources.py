"""Vend API resources."""

from .resource import Resource

__all__ = (
    'Customer',
    'Outlet',
    'PaymentType',
    'Product',
    'Register',
    'RegisterSale',
    'Tax',
    'User',
)


class Customer(Resource):
    pass


class Outlet(Resource):
    pass


class PaymentType(Resource):

    class _Meta:
        endpoint_name = 'payment_type'


class Product(Resource):
    pass


class Register(Resource):
    pass


class RegisterSale(Resource):

    class _Meta:
        endpoint_name = 'register_sale'


class Tax(Resource):

    class _Meta:
        collection_name = 'taxes'


class User(Resource):
    pass

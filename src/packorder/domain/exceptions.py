"""Domain-level exceptions.

Broken invariants raise ``ValidationError``.  Reasons for turning an order
away raise a subclass of ``OrderRejectedError`` that carries an ``ErrorKind``,
so the order manager can report the category without parsing messages.
"""

from enum import Enum


class ErrorKind(Enum):
    DUPLICATE_ORDER_ID = "DuplicateOrderId"
    EMPTY_ORDER = "EmptyOrder"
    INVALID_QUANTITY = "InvalidQuantity"
    QUANTITY_ABOVE_MAXIMUM = "QuantityAboveMaximum"
    UNKNOWN_PRODUCT_CODE = "UnknownProductCode"
    QUANTITY_BELOW_MINIMUM_PACK = "QuantityBelowMinimumPack"
    UNSERVICEABLE_QUANTITY = "UnserviceableQuantity"


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class OrderRejectedError(DomainException):
    """An order submission was turned away."""

    kind: ErrorKind


class DuplicateOrderIdError(OrderRejectedError):
    kind = ErrorKind.DUPLICATE_ORDER_ID


class EmptyOrderError(OrderRejectedError):
    kind = ErrorKind.EMPTY_ORDER


class InvalidQuantityError(OrderRejectedError):
    kind = ErrorKind.INVALID_QUANTITY


class QuantityAboveMaximumError(OrderRejectedError):
    kind = ErrorKind.QUANTITY_ABOVE_MAXIMUM


class UnknownProductCodeError(OrderRejectedError):
    kind = ErrorKind.UNKNOWN_PRODUCT_CODE


class QuantityBelowMinimumPackError(OrderRejectedError):
    kind = ErrorKind.QUANTITY_BELOW_MINIMUM_PACK


class UnserviceableQuantityError(OrderRejectedError):
    """No exact combination of pack sizes adds up to the quantity."""

    kind = ErrorKind.UNSERVICEABLE_QUANTITY

# marketplace/domain/errors.py
"""
Bledy domenowe marketplace.

Kazdy dziedziczy po wbudowanym wyjatku, ktory routery juz lapia
(ValueError -> 400, PermissionError -> 401/403, LookupError -> 404),
a po MarketplaceError mozna je odroznic w warstwie prezentacji.
"""


class MarketplaceError(Exception):
    code = "marketplace_error"


class DuplicateEmailError(MarketplaceError, ValueError):
    code = "duplicate_email"


class InvalidCredentialsError(MarketplaceError, ValueError):
    code = "invalid_credentials"


class OwnProductError(MarketplaceError, ValueError):
    code = "own_product"


class NotAuthenticatedError(MarketplaceError, PermissionError):
    code = "not_authenticated"


class NotOwnerError(MarketplaceError, PermissionError):
    code = "not_owner"


class NotFoundError(MarketplaceError, LookupError):
    code = "not_found"


class DecodeFailure(MarketplaceError, ValueError):
    """Uszkodzona wartosc w store. Nigdy nie wychodzi poza repozytorium."""

    code = "decode_failure"


class ProductSoldError(MarketplaceError, ValueError):
    code = "product_sold"

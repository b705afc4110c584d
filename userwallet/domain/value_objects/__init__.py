from userwallet.domain.value_objects.address import Address
from userwallet.domain.value_objects.email import Email

__all__ = ["Address", "Email"]

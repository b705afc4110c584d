from userwallet.domain.errors.user_error import UserError
from userwallet.domain.errors.wallet_error import WalletError

__all__ = ["UserError", "WalletError"]

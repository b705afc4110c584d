"""Wallet domain error messages."""


class WalletError:
    """Wallet error constants.

    Error Categories:
        - Validation errors: INVALID_AMOUNT, BALANCE_OUT_OF_RANGE
        - Business rule errors: INSUFFICIENT_BALANCE
        - Lookup errors: WALLET_NOT_FOUND
    """

    INVALID_AMOUNT = "Amount must be a positive integer"
    BALANCE_OUT_OF_RANGE = "Balance must be between 0 and 9999999"
    INSUFFICIENT_BALANCE = "Insufficient balance"
    WALLET_NOT_FOUND = "Wallet not found"

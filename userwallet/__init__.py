"""UserWallet: users and wallets over a transactional repository layer."""

__version__ = "0.1.0"

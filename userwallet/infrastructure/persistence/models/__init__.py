"""Database models.

Importing this package registers every table on ``BaseModel.metadata``
(Alembic autogenerate and ``Database.create_all`` rely on it).
"""

from userwallet.infrastructure.persistence.models.user import UserModel
from userwallet.infrastructure.persistence.models.wallet import WalletModel

__all__ = ["UserModel", "WalletModel"]

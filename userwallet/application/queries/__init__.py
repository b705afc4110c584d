from userwallet.application.queries.user_queries import FindUsers

__all__ = ["FindUsers"]

"""User domain error messages.

Constants used as messages in Result failures and validation errors.
"""


class UserError:
    """User error constants.

    Error Categories:
        - Conflict errors: EMAIL_ALREADY_EXISTS
        - Lookup errors: USER_NOT_FOUND
    """

    EMAIL_ALREADY_EXISTS = "User already exists"
    USER_NOT_FOUND = "User not found"

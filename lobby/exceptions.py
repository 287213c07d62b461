class ConfirmationError(RuntimeError):
    """Raised when an email confirmation link cannot be honoured."""


class ConfirmationTokenNotFound(ConfirmationError):
    def __init__(self):
        super().__init__("Could not find confirmation token.")


class ConfirmationTokenExpired(ConfirmationError):
    def __init__(self):
        super().__init__("Confirmation token expired.")


class CampaignEntryNotFound(ConfirmationError):
    def __init__(self):
        super().__init__("Could not find campaign entry.")

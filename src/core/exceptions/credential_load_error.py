class CredentialLoadError(Exception):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Could not load SSH credential: {reason}")

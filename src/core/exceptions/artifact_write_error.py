class ArtifactWriteError(Exception):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write artifact '{path}': {reason}")

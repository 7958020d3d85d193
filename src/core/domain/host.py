from dataclasses import dataclass


@dataclass(frozen=True)
class Host:
    name: str
    address: str
    port: int = 22

    def __post_init__(self):
        if not self.name:
            raise ValueError("Host name cannot be empty")

        if not 1 <= self.port <= 65535:
            raise ValueError(f"Invalid port for host '{self.name}': {self.port}")

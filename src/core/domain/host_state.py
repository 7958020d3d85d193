from enum import Enum


class HostState(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"

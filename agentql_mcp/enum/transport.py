from enum import Enum


class Transport(Enum):
    STDIO = "stdio"
    REST = "rest"

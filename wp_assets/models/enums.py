from enum import Enum


class EnqueueStrategy(str, Enum):
    FLAT = "flat"
    ENTRYPOINT = "entrypoint"

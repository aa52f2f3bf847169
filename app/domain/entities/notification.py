from dataclasses import dataclass


@dataclass(frozen=True)
class Notification:
    level: str  # "error" | "info"
    message: str

"""
Config Module

Runtime settings for the Venmo request manager, read from environment
variables once at import time.

Environment:
    VRM_SECRET_KEY                   Flask secret key.
    VRM_ITEM_REMOVAL_MODE            detach | share | delete (default: detach).
    VRM_CASCADE_PARTICIPANT_REMOVAL  Drop a removed participant from every item.
    VRM_CURRENCY_SYMBOL              Symbol used when displaying money (default: $).
    VRM_LOG_LEVEL                    Logging level name (default: INFO).
    VRM_HOST / VRM_PORT              Bind address for the development servers.
"""

import logging
import os
from dataclasses import dataclass


# How removing an item from one participant's list affects co-sharers
REMOVAL_DETACH = "detach"   # only that participant stops seeing it
REMOVAL_SHARE = "share"     # that participant's share is dropped, others re-split
REMOVAL_DELETE = "delete"   # the item is deleted for everyone
VALID_REMOVAL_MODES = {REMOVAL_DETACH, REMOVAL_SHARE, REMOVAL_DELETE}


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Config:
    """Settings shared by the form app and the JSON API."""
    SECRET_KEY: str = "dev-venmo-request-manager"
    ITEM_REMOVAL_MODE: str = REMOVAL_DETACH
    CASCADE_PARTICIPANT_REMOVAL: bool = False
    CURRENCY_SYMBOL: str = "$"
    LOG_LEVEL: str = "INFO"
    HOST: str = "127.0.0.1"
    PORT: int = 5000

    def __post_init__(self):
        self.ITEM_REMOVAL_MODE = self.ITEM_REMOVAL_MODE.strip().lower()
        if self.ITEM_REMOVAL_MODE not in VALID_REMOVAL_MODES:
            raise ValueError(
                f"ITEM_REMOVAL_MODE must be one of {sorted(VALID_REMOVAL_MODES)}, "
                f"got: {self.ITEM_REMOVAL_MODE}"
            )

    @property
    def log_level(self) -> int:
        level = logging.getLevelName(self.LOG_LEVEL.upper())
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def from_env(cls) -> "Config":
        """Build a Config from VRM_* environment variables."""
        return cls(
            SECRET_KEY=os.environ.get("VRM_SECRET_KEY", cls.SECRET_KEY),
            ITEM_REMOVAL_MODE=os.environ.get("VRM_ITEM_REMOVAL_MODE", cls.ITEM_REMOVAL_MODE),
            CASCADE_PARTICIPANT_REMOVAL=_env_bool("VRM_CASCADE_PARTICIPANT_REMOVAL"),
            CURRENCY_SYMBOL=os.environ.get("VRM_CURRENCY_SYMBOL", cls.CURRENCY_SYMBOL),
            LOG_LEVEL=os.environ.get("VRM_LOG_LEVEL", cls.LOG_LEVEL),
            HOST=os.environ.get("VRM_HOST", cls.HOST),
            PORT=int(os.environ.get("VRM_PORT", cls.PORT)),
        )


config = Config.from_env()

"""Computer-controlled players."""

from .base import BaseBot, BotAction
from .tiered import TieredBot, decide

__all__ = ["BaseBot", "BotAction", "TieredBot", "decide"]

"""
Integration layer: the serialized pair shell, capabilities, config and events.
"""

from .access import PoolAdmin, SwapProxy
from .config import PoolConfig, load_pool_config, pool_config_from_mapping
from .events import EventSink, LoggingEventSink, RecordingEventSink
from .swap_pair import SwapPair

__all__ = [
    "PoolAdmin",
    "SwapProxy",
    "PoolConfig",
    "load_pool_config",
    "pool_config_from_mapping",
    "EventSink",
    "LoggingEventSink",
    "RecordingEventSink",
    "SwapPair",
]

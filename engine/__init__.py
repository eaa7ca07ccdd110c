"""
engine/
-------
Playback & recording layer.

    from engine import PlaybackController, Recorder, compare
"""

from engine.playback import PlaybackController, PlaybackState
from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare

__all__ = [
    "PlaybackController",
    "PlaybackState",
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
]

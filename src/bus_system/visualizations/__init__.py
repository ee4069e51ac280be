"""
Built-in bus visualizations
"""

from .alternating_pulse import AlternatingPulseVisualization
from .channel_chase import ChannelChaseVisualization
from .high_striker_fail import HighStrikerFailVisualization
from .high_striker_physics import HighStrikerPhysicsVisualization
from .high_striker_success import HighStrikerSuccessVisualization
from .synchronized_rainbow import SynchronizedRainbowVisualization

__all__ = [
    'AlternatingPulseVisualization',
    'ChannelChaseVisualization',
    'HighStrikerFailVisualization',
    'HighStrikerPhysicsVisualization',
    'HighStrikerSuccessVisualization',
    'SynchronizedRainbowVisualization',
]

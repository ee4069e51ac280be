"""
Bus System - Coordinated animations across the channels of a pixel bus
"""

from .animation_helpers import AnimationHelpers
from .bus_animation import AnimationCategory, BusAnimation
from .exceptions import AnimationIncompatibleError, AnimationNotFoundError, InvalidVisualizationError
from .factory import AnimationFactory
from .operations import ChannelCallOperation, OperationBatch, RunAnimationOperation, WaitOperation
from .physics import Physics, PhysicsState
from .pixel_bus import AnimatablePixelBus, BusMode, PixelBus
from .registry import BusAnimationRegistry
from .shapes import HighStriker
from .strategies import BackgroundStrategy, ExecutionStrategy, SyncStrategy, create_strategy
from .visualization import BusVisualization

__all__ = [
    'AnimationHelpers',
    'AnimationCategory',
    'BusAnimation',
    'AnimationIncompatibleError',
    'AnimationNotFoundError',
    'InvalidVisualizationError',
    'AnimationFactory',
    'ChannelCallOperation',
    'OperationBatch',
    'RunAnimationOperation',
    'WaitOperation',
    'Physics',
    'PhysicsState',
    'AnimatablePixelBus',
    'BusMode',
    'PixelBus',
    'BusAnimationRegistry',
    'HighStriker',
    'BackgroundStrategy',
    'ExecutionStrategy',
    'SyncStrategy',
    'create_strategy',
    'BusVisualization',
]

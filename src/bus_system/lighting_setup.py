"""
Lighting setup - builds a pixel bus from configuration
"""

from typing import Optional, TYPE_CHECKING

from led_system import ChannelDispatcher, LedStrip, PixelChannel, PixelStripAdapter, VirtualStrip

from .config import ChannelConfig, LightingConfig
from .factory import AnimationFactory
from .pixel_bus import AnimatablePixelBus
from .registry import BusAnimationRegistry
from .strategies import create_strategy

if TYPE_CHECKING:
    from lighting_utils import ClassLogger


def create_strip(config: ChannelConfig) -> LedStrip:
    """
    Create the LED driver for one channel.

    Raises:
        ImportError: Hardware channel requested but rpi_ws281x is unavailable
    """
    if config.virtual:
        return VirtualStrip(config.pixel_count, brightness=config.brightness)

    return PixelStripAdapter(
        led_count=config.pixel_count,
        gpio_pin=config.gpio_pin,
        freq_hz=config.freq_hz,
        dma=config.dma,
        invert=config.invert,
        brightness=config.brightness,
        channel=config.pwm_channel,
    )


def create_pixel_bus(config: LightingConfig,
                     factory: Optional[AnimationFactory] = None,
                     logger: Optional['ClassLogger'] = None) -> AnimatablePixelBus:
    """
    Create an animatable bus with one channel per configured strip, in config order.

    Without a factory the shared one is used, initialised with the config's
    discovery setting on first use; a given factory is populated here if it
    has nothing registered yet.
    """
    config.validate()

    if factory is None:
        factory = AnimationFactory.shared(config.use_auto_discovery)
    elif not factory.registered():
        BusAnimationRegistry.initialize(factory, config.use_auto_discovery)

    bus_logger = logger.create_class_logger("PixelBus") if logger else None
    strategy_logger = logger.create_class_logger("BackgroundStrategy") if logger else None

    bus = AnimatablePixelBus(factory=factory,
                             strategy=create_strategy(config.async_strategy, strategy_logger),
                             logger=bus_logger)
    for channel_config in config.channels:
        strip = create_strip(channel_config)
        bus.add_channel(channel_config.name,
                        PixelChannel(channel_config.name, strip, channel_config.shape))
    return bus


class LightingSetup:
    """Entry point for a host application: named channels and their dispatchers"""

    def __init__(self, bus: AnimatablePixelBus, logger: Optional['ClassLogger'] = None):
        if logger is None:
            from lighting_utils import get_class_logger
            logger = get_class_logger("LightingSetup")
        self.bus = bus
        self.logger = logger

    @classmethod
    def boot(cls, config: LightingConfig,
             factory: Optional[AnimationFactory] = None,
             logger: Optional['ClassLogger'] = None) -> 'LightingSetup':
        """Validate config and build the bus"""
        bus = create_pixel_bus(config, factory, logger)
        setup = cls(bus, logger)
        setup.logger.info(f"Lighting ready: {', '.join(bus.channel_names())} "
                          f"({config.total_led_count} LEDs, {config.async_strategy} strategy)")
        return setup

    def channel(self, name: str) -> Optional[ChannelDispatcher]:
        """Dispatcher for a channel, None if the bus has no such channel"""
        pixel_channel = self.bus.get_channel(name)
        if pixel_channel is None:
            return None
        return ChannelDispatcher(pixel_channel, self.logger.create_class_logger("ChannelDispatcher"))

    def get_pixel_channel(self, name: str) -> Optional[PixelChannel]:
        return self.bus.get_channel(name)

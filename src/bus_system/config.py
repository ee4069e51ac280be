"""
Lighting configuration
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping

from led_system.channel import ChannelShape

from .strategies import STRATEGIES

# Older configs name the background strategy after the process driver
STRATEGY_ALIASES = {
    'process': 'background',
}


@dataclass
class ChannelConfig:
    """Configuration for a single channel and its LED strip"""
    name: str
    led_count: int = 8
    shape: ChannelShape = ChannelShape.RGB_STRIP
    gpio_pin: int = 18
    freq_hz: int = 800000
    dma: int = 10
    invert: bool = False
    brightness: int = 255  # 0-255
    pwm_channel: int = 0
    virtual: bool = False  # In-memory strip instead of hardware

    @property
    def pixel_count(self) -> int:
        """LED count, overridden by shapes with a fixed number of pixels"""
        return self.shape.fixed_pixel_count or self.led_count


@dataclass
class LightingConfig:
    """Bus configuration: channels in bus order plus execution settings"""

    channels: List[ChannelConfig] = field(default_factory=list)
    async_strategy: str = "sync"
    frame_duration_ms: float = 20
    use_auto_discovery: bool = True

    @property
    def channel_names(self) -> List[str]:
        return [channel.name for channel in self.channels]

    @property
    def total_led_count(self) -> int:
        return sum(channel.pixel_count for channel in self.channels)

    @property
    def target_fps(self) -> float:
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        """Basic validation of configuration"""
        if not self.channels:
            raise ValueError("At least one channel must be configured")

        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")

        if self.async_strategy not in STRATEGIES:
            raise ValueError(f"Unknown async strategy '{self.async_strategy}' "
                             f"(expected one of: {', '.join(STRATEGIES)})")

        names = self.channel_names
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate channel names: {duplicates}")

        for channel in self.channels:
            if not channel.name:
                raise ValueError("Channel name must not be empty")
            if channel.led_count <= 0:
                raise ValueError(f"LED count must be positive, got {channel.led_count} for '{channel.name}'")
            if not (0 <= channel.brightness <= 255):
                raise ValueError(f"LED brightness must be 0-255, got {channel.brightness} for '{channel.name}'")
            if not channel.virtual and not (2 <= channel.gpio_pin <= 27):  # Valid RPi GPIO range
                raise ValueError(f"GPIO pin {channel.gpio_pin} out of valid range (2-27) for '{channel.name}'")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'LightingConfig':
        """
        Build a config from the device-map layout:

            {
                "async_concurrency_driver": "sync",
                "devices": {
                    "solo": {"shape": "single-diode", "gpio_pin": 18},
                    "rail": {"shape": "rgb-strip", "length": 15},
                },
            }

        Raises:
            ValueError: Unknown shape name
        """
        strategy = str(data.get('async_concurrency_driver', 'sync')).lower()
        strategy = STRATEGY_ALIASES.get(strategy, strategy)

        channels = []
        for name, device in data.get('devices', {}).items():
            shape = ChannelShape(device.get('shape', ChannelShape.RGB_STRIP.value))
            led_count = device.get('length', device.get('led_count', shape.fixed_pixel_count or 8))
            channels.append(ChannelConfig(
                name=name,
                led_count=int(led_count),
                shape=shape,
                gpio_pin=int(device.get('gpio_pin', 18)),
                freq_hz=int(device.get('freq_hz', 800000)),
                dma=int(device.get('dma', 10)),
                invert=bool(device.get('invert', False)),
                brightness=int(device.get('brightness', 255)),
                pwm_channel=int(device.get('pwm_channel', 0)),
                virtual=bool(device.get('virtual', False)),
            ))

        return cls(
            channels=channels,
            async_strategy=strategy,
            frame_duration_ms=float(data.get('frame_duration_ms', 20)),
            use_auto_discovery=bool(data.get('use_auto_discovery', True)),
        )


def create_default_config(virtual: bool = False) -> LightingConfig:
    """Two-channel carnival layout: 15-pixel rail and a 2-pixel bell"""
    return LightingConfig(channels=[
        ChannelConfig(name="rail", led_count=15, gpio_pin=18, pwm_channel=0, virtual=virtual),
        ChannelConfig(name="bell", led_count=2, shape=ChannelShape.DOUBLE_DOTS,
                      gpio_pin=13, pwm_channel=1, virtual=virtual),
    ])

#!/usr/bin/env python3
"""
Play a bus animation on the configured LED channels.

Usage:
    play-animation high-striker-physics
    play-animation synchronized_rainbow --duration 10000 --virtual
    play-animation channel-chase --strategy background --log-dir logs
    play-animation alternating-pulse --config lighting.json

Without --duration the animation repeats in 5 second cycles until Ctrl+C
(or SIGTERM). Either way the channels go red, then switch off one by one.
"""

import argparse
import json
import logging
import signal
import sys
import time
from typing import Callable, List, Optional

from bus_system import AnimatablePixelBus, BackgroundStrategy, BusAnimation
from bus_system.config import LightingConfig, create_default_config
from bus_system.lighting_setup import LightingSetup
from lighting_utils import ClassLogger, HybridLogger

CYCLE_MS = 5000
SHUTDOWN_COLOR = 0xFF0000
SHUTDOWN_STEP_MS = 400


def find_animation(name: str) -> Optional[BusAnimation]:
    """Case-insensitive lookup; dashes, spaces and underscores are interchangeable"""
    return BusAnimation.from_name(name)


def animation_suggestions() -> List[str]:
    """One line per known animation, with its category"""
    return [f"  • {animation.value} ({animation.display_name}) [{animation.category.value}]"
            for animation in BusAnimation]


class AnimationPlayer:
    """Runs one animation on a bus and owns the shutdown sequence"""

    def __init__(self, bus: AnimatablePixelBus, animation: BusAnimation, logger: ClassLogger,
                 sleep: Callable[[float], None] = time.sleep):
        self.bus = bus
        self.animation = animation
        self.logger = logger
        self._sleep = sleep
        self.should_shutdown = False
        self.iterations = 0

    def request_shutdown(self, sig=None, frame=None) -> None:
        """Signal handler: finish the current cycle, then stop"""
        if sig is not None:
            self.logger.warning(f"🛑 Signal {sig} received, stopping after the current cycle")
        self.should_shutdown = True

    def play_cycle(self, duration_ms: int) -> None:
        """One queued run of the animation, waiting for it when it runs in the background"""
        self.bus.with_async().animate(self.animation, duration_ms).fire()
        self.bus.without_async()
        if isinstance(self.bus.strategy, BackgroundStrategy):
            self.bus.strategy.join()

    def run_forever(self) -> None:
        while not self.should_shutdown:
            self.iterations += 1
            self.logger.info(f"🔄 Iteration #{self.iterations}")
            self.play_cycle(CYCLE_MS)

    def run_with_duration(self, duration_ms: int) -> None:
        self.iterations += 1
        self.play_cycle(duration_ms)

    def graceful_shutdown(self) -> None:
        """All channels red, then each channel off in bus order"""
        channels = self.bus.channels()
        if not channels:
            return

        self.logger.info("🔴 Initiating graceful shutdown...")
        for name, channel in channels.items():
            try:
                channel.fill(SHUTDOWN_COLOR).show()
            except Exception as e:
                self.logger.error(f"Error on '{name}' while going red: {e}", exception=e)

        self._sleep(SHUTDOWN_STEP_MS / 1000.0)

        names = list(channels)
        for index, name in enumerate(names):
            self.logger.info(f"   Shutting down '{name}' [{index + 1}/{len(names)}]")
            try:
                channels[name].clear().show()
            except Exception as e:
                self.logger.error(f"Error on '{name}' while switching off: {e}", exception=e)
            if index < len(names) - 1:
                self._sleep(SHUTDOWN_STEP_MS / 1000.0)

        self.logger.info("✅ All channels shut down cleanly")
        self.logger.flush()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="play-animation",
        description="Play a bus animation on RGB LED channels",
    )
    parser.add_argument('animation', help="Animation to play (e.g. high-striker-physics, channel_chase)")
    parser.add_argument('--duration', type=int, default=None,
                        help="Duration in milliseconds (runs until Ctrl+C if omitted)")
    parser.add_argument('--virtual', action='store_true',
                        help="Use in-memory strips instead of hardware")
    parser.add_argument('--strategy', choices=['sync', 'background'], default=None,
                        help="Execution strategy for fired batches")
    parser.add_argument('--config', default=None,
                        help="JSON lighting config (defaults to the rail + bell layout)")
    parser.add_argument('--log-dir', default=None, help="Also write logs to this directory")
    return parser


def load_config(args: argparse.Namespace) -> LightingConfig:
    if args.config:
        with open(args.config, encoding="utf-8") as f:
            config = LightingConfig.from_dict(json.load(f))
        if args.virtual:
            for channel in config.channels:
                channel.virtual = True
    else:
        config = create_default_config(virtual=args.virtual)

    if args.strategy:
        config.async_strategy = args.strategy
    return config


def main(argv: Optional[List[str]] = None, setup: Optional[LightingSetup] = None,
         sleep: Callable[[float], None] = time.sleep) -> int:
    args = build_parser().parse_args(argv)

    hybrid_logger = HybridLogger("PlayAnimation", log_dir=args.log_dir)
    logger = hybrid_logger.get_main_logger(logging.INFO)
    previous_handlers = {sig: signal.getsignal(sig) for sig in (signal.SIGINT, signal.SIGTERM)}

    try:
        animation = find_animation(args.animation)
        if animation is None:
            print(f"❌ Animation '{args.animation}' not found!")
            print("\nAvailable animations:")
            for line in animation_suggestions():
                print(line)
            print("\n💡 Tip: names are case-insensitive, dashes and underscores both work")
            print("   Examples: high-striker-physics, high_striker_physics, HIGH_STRIKER_PHYSICS")
            return 1

        if setup is None:
            try:
                setup = LightingSetup.boot(load_config(args), logger=logger)
            except (ImportError, ValueError, OSError) as e:
                logger.error(f"❌ Could not set up lighting: {e}", exception=e)
                return 1

        player = AnimationPlayer(setup.bus, animation, logger, sleep=sleep)
        signal.signal(signal.SIGINT, player.request_shutdown)
        signal.signal(signal.SIGTERM, player.request_shutdown)

        logger.info(f"🎨 Playing animation: {animation.display_name}")
        logger.info(f"📺 Channels: {', '.join(setup.bus.channel_names())}")
        logger.info("⏱️  Duration: " + ("∞ (press Ctrl+C to stop)" if args.duration is None
                                         else f"{args.duration}ms"))

        try:
            if args.duration is None:
                player.run_forever()
            else:
                player.run_with_duration(args.duration)
        except Exception as e:
            logger.error(f"Error running animation: {e}", exception=e)
            player.graceful_shutdown()
            return 1

        logger.info("✨ Animation complete!")
        player.graceful_shutdown()
        return 0

    finally:
        for sig, handler in previous_handlers.items():
            signal.signal(sig, handler)
        hybrid_logger.cleanup()


if __name__ == "__main__":
    sys.exit(main())

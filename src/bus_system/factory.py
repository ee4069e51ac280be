"""
Animation factory - maps bus animations to visualization instances

Each BusAnimation is backed by exactly one visualization instance, created
on first use and cached until clear(). Re-registering an animation replaces
the constructor but leaves an already cached instance in place.
"""

import importlib
import inspect
import pkgutil
from typing import Callable, Dict, Iterable, List, Mapping, Optional, TYPE_CHECKING

from .bus_animation import BusAnimation
from .exceptions import AnimationNotFoundError, InvalidVisualizationError
from .visualization import CONTRACT_METHODS, BusVisualization

if TYPE_CHECKING:
    from lighting_utils import ClassLogger

VisualizationConstructor = Callable[[], BusVisualization]


def _missing_methods(target: object) -> List[str]:
    return [name for name in CONTRACT_METHODS if not callable(getattr(target, name, None))]


class AnimationFactory:
    """Registry of visualization constructors plus the instance cache"""

    _shared: Optional['AnimationFactory'] = None

    def __init__(self, logger: Optional['ClassLogger'] = None):
        if logger is None:
            from lighting_utils import get_class_logger
            logger = get_class_logger("AnimationFactory")
        self.logger = logger
        self._registry: Dict[BusAnimation, VisualizationConstructor] = {}
        self._instances: Dict[BusAnimation, BusVisualization] = {}

    @classmethod
    def shared(cls, use_auto_discovery: bool = True) -> 'AnimationFactory':
        """
        Process-wide factory, populated with the built-in animations on first access.

        use_auto_discovery only applies to that first access.
        """
        if cls._shared is None:
            from .registry import BusAnimationRegistry
            factory = cls()
            BusAnimationRegistry.initialize(factory, use_auto_discovery)
            cls._shared = factory
        return cls._shared

    @classmethod
    def reset_shared(cls) -> None:
        cls._shared = None

    def register(self, animation: BusAnimation, constructor: VisualizationConstructor) -> None:
        """
        Register the constructor for an animation.

        Classes are checked without being instantiated and must be concrete.
        Any other callable is invoked once to check what it produces.

        Raises:
            InvalidVisualizationError: If the product is not a bus visualization
        """
        if not isinstance(animation, BusAnimation):
            raise InvalidVisualizationError(f"Expected a BusAnimation, got {animation!r}")
        if not callable(constructor):
            raise InvalidVisualizationError(f"Visualization constructor for {animation.value} is not callable")

        if inspect.isclass(constructor):
            if inspect.isabstract(constructor):
                raise InvalidVisualizationError(f"{constructor.__name__} is abstract")
            missing = _missing_methods(constructor)
        else:
            missing = _missing_methods(constructor())

        if missing:
            raise InvalidVisualizationError(
                f"Visualization for {animation.value} is missing: {', '.join(missing)}"
            )

        self._registry[animation] = constructor
        self.logger.debug(f"Registered {animation.value} -> {getattr(constructor, '__name__', constructor)}")

    def register_batch(self, mappings: Mapping[BusAnimation, VisualizationConstructor]) -> None:
        for animation, constructor in mappings.items():
            self.register(animation, constructor)

    def create(self, animation: BusAnimation) -> BusVisualization:
        """
        Return the visualization for an animation, constructing it on first use.

        Raises:
            AnimationNotFoundError: If nothing is registered for the animation
        """
        if animation in self._instances:
            return self._instances[animation]

        if animation not in self._registry:
            raise AnimationNotFoundError(animation)

        instance = self._registry[animation]()
        self._instances[animation] = instance
        return instance

    def has(self, animation: BusAnimation) -> bool:
        return animation in self._registry

    def registered(self) -> List[BusAnimation]:
        return list(self._registry)

    def clear(self) -> None:
        """Drop all registrations and cached instances"""
        self._registry.clear()
        self._instances.clear()

    def discover(self, candidates: Iterable[object]) -> int:
        """
        Register every candidate that turns out to be a visualization.

        Best effort: candidates that are not concrete classes, fail to
        construct or fail to report their animation type are skipped.

        Returns:
            Number of animations registered
        """
        count = 0
        for candidate in candidates:
            if not inspect.isclass(candidate) or inspect.isabstract(candidate):
                continue
            if _missing_methods(candidate):
                continue
            try:
                animation = candidate().get_animation_type()
                self.register(animation, candidate)
            except Exception as e:
                self.logger.debug(f"Skipping {candidate.__name__} during discovery: {e}")
                continue
            count += 1
        return count

    def discover_package(self, package_name: str) -> int:
        """
        Import every module of a package and discover the classes defined there.

        Classes only imported into a module (base classes, helpers) are ignored.
        """
        package = importlib.import_module(package_name)
        candidates = []
        for module_info in pkgutil.iter_modules(package.__path__):
            module = importlib.import_module(f"{package_name}.{module_info.name}")
            candidates.extend(
                obj for _name, obj in inspect.getmembers(module, inspect.isclass)
                if obj.__module__ == module.__name__
            )
        count = self.discover(candidates)
        self.logger.info(f"Discovered {count} bus animations in {package_name}")
        return count

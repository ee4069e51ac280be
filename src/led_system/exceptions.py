"""
Channel level errors
"""


class PixelRangeError(IndexError):
    """Pixel index outside 0..pixel_count-1"""

    def __init__(self, channel_name: str, index: int, pixel_count: int):
        self.channel_name = channel_name
        self.index = index
        self.pixel_count = pixel_count
        super().__init__(
            f"Pixel index {index} out of range for channel '{channel_name}' (0-{pixel_count - 1})"
        )


class UnsupportedOperationError(AttributeError):
    """Operation name is not part of the channel interface"""

    def __init__(self, operation: str, target: str = "PixelChannel"):
        self.operation = operation
        super().__init__(f"Method {operation} does not exist on {target}")


class ChannelNotFoundError(KeyError):
    """Targeted channel name is not on the bus"""

    def __init__(self, channel_name: str):
        self.channel_name = channel_name
        super().__init__(channel_name)

    def __str__(self) -> str:
        return f"No channel named '{self.channel_name}' on this bus"

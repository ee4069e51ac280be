"""Tests for pixels, drivers and channels."""

from unittest.mock import MagicMock

import pytest

from led_system import (
    ChannelShape,
    Pixel,
    PixelChannel,
    PixelRangeError,
    PixelStripAdapter,
    VirtualStrip,
)
from led_system import pixel_strip_adapter


class TestPixel:
    def test_packs_components(self):
        pixel = Pixel(255, 128, 1)
        assert pixel == 0xFF8001
        assert (pixel.r, pixel.g, pixel.b) == (255, 128, 1)

    def test_packed_value_is_masked_to_24_bits(self):
        assert Pixel(0x12FFD700) == 0xFFD700

    def test_partial_components_rejected(self):
        with pytest.raises(ValueError):
            Pixel(1, 2)

    def test_scaled_clamps_factor(self):
        red = Pixel(200, 100, 50)
        assert red.scaled(0.5) == Pixel(100, 50, 25)
        assert red.scaled(2.0) == red
        assert red.scaled(-1.0).is_black

    def test_repr_is_hex(self):
        assert repr(Pixel(0xFF0000)) == "Pixel(0xFF0000)"


class TestVirtualStrip:
    def test_show_captures_frame(self):
        strip = VirtualStrip(3)
        strip[1] = Pixel(0x00FF00)
        assert strip.shown[1] == 0
        strip.show()
        assert strip.shown == [0, 0x00FF00, 0]
        assert strip.show_count == 1

    def test_slice_assignment(self):
        strip = VirtualStrip(4)
        strip[0:2] = [Pixel(1), Pixel(2)]
        strip[2:] = Pixel(3)
        assert strip[:] == [1, 2, 3, 3]

    def test_slice_length_mismatch(self):
        strip = VirtualStrip(4)
        with pytest.raises(ValueError):
            strip[0:2] = [Pixel(1)]

    def test_list_to_single_position(self):
        strip = VirtualStrip(4)
        with pytest.raises(TypeError):
            strip[0] = [Pixel(1)]

    def test_requires_positive_count(self):
        with pytest.raises(ValueError):
            VirtualStrip(0)


class TestPixelStripAdapter:
    def test_missing_library_raises_import_error(self, monkeypatch):
        monkeypatch.setattr(pixel_strip_adapter, "PixelStrip", None)
        with pytest.raises(ImportError):
            PixelStripAdapter(15, 18)

    def test_forwards_to_driver(self, monkeypatch):
        driver_cls = MagicMock()
        monkeypatch.setattr(pixel_strip_adapter, "PixelStrip", driver_cls)

        adapter = PixelStripAdapter(15, 13, brightness=64, channel=1)

        driver_cls.assert_called_once_with(15, 13, 800000, 10, False, 64, 1)
        driver = driver_cls.return_value
        driver.begin.assert_called_once()

        adapter.set_brightness(10)
        driver.setBrightness.assert_called_once_with(10)
        adapter.show()
        driver.show.assert_called_once()


class TestPixelChannel:
    @pytest.fixture
    def strip(self):
        return VirtualStrip(5)

    @pytest.fixture
    def channel(self, strip):
        return PixelChannel("rail", strip)

    def test_setters_are_buffer_only(self, channel, strip):
        channel.fill(0xFF0000).set_pixel(2, 0x0000FF)
        assert strip.show_count == 0
        assert channel.get_pixel(2) == 0x0000FF

        channel.show()
        assert strip.show_count == 1
        assert strip.shown == [0xFF0000, 0xFF0000, 0x0000FF, 0xFF0000, 0xFF0000]

    def test_mutators_chain(self, channel):
        assert channel.fill(1) is channel
        assert channel.clear() is channel
        assert channel.set_pixel(0, 1) is channel
        assert channel.set_brightness(10) is channel
        assert channel.show() is channel

    @pytest.mark.parametrize("index", [-1, 5, 100])
    def test_out_of_range_index(self, channel, index):
        with pytest.raises(PixelRangeError) as excinfo:
            channel.set_pixel(index, 0xFFFFFF)
        assert excinfo.value.index == index
        assert excinfo.value.pixel_count == 5
        with pytest.raises(IndexError):
            channel.get_pixel(index)

    def test_brightness_clamped(self, channel):
        assert channel.set_brightness(300).get_brightness() == 255
        assert channel.set_brightness(-5).get_brightness() == 0

    def test_frame_is_a_copy(self, channel):
        frame = channel.frame()
        frame[0] = Pixel(0xFFFFFF)
        assert channel.get_pixel(0) == 0

    def test_supported_operations(self):
        assert PixelChannel.supports("fill")
        assert PixelChannel.supports("pixel_count")
        assert not PixelChannel.supports("explode")
        assert not PixelChannel.supports("_check_index")


def test_channel_shape_pixel_counts():
    assert ChannelShape.DOUBLE_DOTS.fixed_pixel_count == 2
    assert ChannelShape.SINGLE_DIODE.fixed_pixel_count == 1
    assert ChannelShape.RGB_STRIP.fixed_pixel_count is None
    assert ChannelShape("double-dots") is ChannelShape.DOUBLE_DOTS

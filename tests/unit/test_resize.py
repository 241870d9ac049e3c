import pytest
from PIL import Image

from photo_worker.compression.exceptions import ImageResizeError
from photo_worker.compression.resize import downscale, fit_within


class TestFitWithin:
    def test_scales_by_one_third(self) -> None:
        assert fit_within(1200, 1800, 400, 600) == (400, 600)

    def test_width_limited(self) -> None:
        assert fit_within(1000, 500, 400, 600) == (400, 200)

    def test_height_limited(self) -> None:
        assert fit_within(500, 1000, 400, 600) == (300, 600)

    def test_floors_fractional_side(self) -> None:
        assert fit_within(401, 601, 400, 600) == (400, 599)

    def test_only_height_exceeds(self) -> None:
        assert fit_within(399, 601, 400, 600) == (398, 600)

    def test_clamps_to_one_pixel(self) -> None:
        assert fit_within(10_000, 1, 400, 600) == (400, 1)

    @pytest.mark.parametrize("size", [(400, 600), (10, 10), (400, 1), (1, 600)])
    def test_returns_none_when_already_fits(self, size: tuple[int, int]) -> None:
        assert fit_within(*size, 400, 600) is None

    @pytest.mark.parametrize(
        "size",
        [(1200, 1800), (4032, 3024), (3000, 4000), (641, 480), (1920, 1081), (5000, 333)],
    )
    def test_preserves_aspect_ratio_within_bounds(self, size: tuple[int, int]) -> None:
        width, height = size

        target = fit_within(width, height, 400, 600)

        assert target is not None
        new_width, new_height = target
        assert new_width <= 400
        assert new_height <= 600
        factor = min(400 / width, 600 / height)
        assert abs(new_width - width * factor) <= 1
        assert abs(new_height - height * factor) <= 1


class TestDownscale:
    def test_resizes_to_target(self) -> None:
        image = Image.new("RGB", (80, 60), (10, 20, 30))

        assert downscale(image, (40, 30)).size == (40, 30)

    def test_palette_image_is_resampled_as_rgb(self) -> None:
        image = Image.new("P", (80, 60), 1)

        resized = downscale(image, (40, 30))

        assert resized.mode == "RGB"
        assert resized.size == (40, 30)

    def test_wraps_pillow_errors(self) -> None:
        image = Image.new("RGB", (80, 60))

        with pytest.raises(ImageResizeError, match="resize to 0x30 failed"):
            downscale(image, (0, 30))

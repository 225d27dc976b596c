"""Unit tests for texture objects.

Tests cover:
- SamplerMode parsing
- ImageTexture construction, copying and mip pyramid caching
- Dispatch to the nearest, bilinear and trilinear samplers
- Explicit revalidation after in-place changes
- Degenerate images under every mode
- ConstantTexture evaluation
- Texture equality
"""

import numpy as np
import pytest


@pytest.fixture
def white_image():
    """A 4x4 image with every texel (1, 1, 1)."""
    from src.texturing.core.color import Color
    from src.texturing.core.image import HDRImage

    return HDRImage.filled(4, 4, Color(1.0, 1.0, 1.0))


class TestSamplerMode:
    """Test the SamplerMode enumeration."""

    def test_from_name(self):
        """Test case-insensitive parsing of mode names."""
        from src.texturing.textures.texture import SamplerMode

        assert SamplerMode.from_name("nearest") == SamplerMode.NEAREST
        assert SamplerMode.from_name("Bilinear") == SamplerMode.BILINEAR
        assert SamplerMode.from_name(" TRILINEAR ") == SamplerMode.TRILINEAR

    def test_from_name_rejects_unknown(self):
        """Test that unknown names raise ValueError listing valid modes."""
        from src.texturing.textures.texture import SamplerMode

        with pytest.raises(ValueError, match="nearest, bilinear, trilinear"):
            SamplerMode.from_name("anisotropic")


class TestImageTextureConstruction:
    """Test ImageTexture construction and pyramid caching."""

    def test_source_image_is_copied(self, white_image):
        """Test that the texture never aliases the caller's image."""
        from src.texturing.core.color import Color
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        texture = ImageTexture(SamplerMode.NEAREST, white_image)
        white_image.set(0, 0, Color(5.0, 5.0, 5.0))

        assert texture.image is not white_image
        assert texture.evaluate((0.0, 0.0)) == Color(1.0, 1.0, 1.0)

    def test_trilinear_builds_pyramid_eagerly(self, white_image):
        """Test the 4x4 white scenario: two cached levels, all white."""
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        texture = ImageTexture(SamplerMode.TRILINEAR, white_image)

        assert [(level.width, level.height) for level in texture.levels] == [(2, 2), (1, 1)]
        for level in texture.levels:
            assert np.all(level.pixels == 1.0)

    @pytest.mark.parametrize("mode", ["NEAREST", "BILINEAR"])
    def test_other_modes_keep_no_pyramid(self, white_image, mode):
        """Test that non-trilinear modes keep an empty pyramid."""
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        texture = ImageTexture(SamplerMode[mode], white_image)

        assert texture.levels == ()

    def test_progress_callback_reports_rebuilds(self, white_image):
        """Test that the progress callback fires for every pyramid build."""
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        calls = []
        texture = ImageTexture(
            SamplerMode.TRILINEAR,
            white_image,
            progress=lambda done, total: calls.append((done, total)),
        )
        texture.make_valid()

        assert calls == [(1, 2), (2, 2), (1, 2), (2, 2)]

    def test_levels_cannot_be_replaced_through_property(self, white_image):
        """Test that levels exposes a read-only snapshot."""
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        texture = ImageTexture(SamplerMode.TRILINEAR, white_image)

        assert isinstance(texture.levels, tuple)
        with pytest.raises(AttributeError):
            texture.levels = ()

    def test_repr(self, white_image):
        """Test the string representation."""
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        texture = ImageTexture(SamplerMode.TRILINEAR, white_image)

        assert repr(texture) == "ImageTexture(sampler=trilinear, width=4, height=4, levels=2)"


class TestImageTextureEvaluate:
    """Test sampler dispatch."""

    def test_nearest_dispatch(self, gradient_image):
        """Test that nearest mode returns the containing texel."""
        from src.texturing.sampling.nearest import sample_nearest
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        texture = ImageTexture(SamplerMode.NEAREST, gradient_image)

        for uv in [(0.0, 0.0), (0.4, 0.6), (1.0, 1.0)]:
            assert texture.evaluate(uv, lod=3.0) == sample_nearest(gradient_image, uv)

    def test_bilinear_dispatch_ignores_lod(self, gradient_image):
        """Test that bilinear mode samples the base image whatever the lod."""
        from src.texturing.sampling.bilinear import sample_bilinear
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        texture = ImageTexture(SamplerMode.BILINEAR, gradient_image)

        for lod in [0.0, 1.0, 2.5]:
            assert texture.evaluate((0.33, 0.66), lod) == sample_bilinear(
                gradient_image, (0.33, 0.66)
            )

    def test_trilinear_dispatch(self, gradient_image):
        """Test that trilinear mode samples the cached pyramid."""
        from src.texturing.sampling.trilinear import sample_trilinear
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        texture = ImageTexture(SamplerMode.TRILINEAR, gradient_image)

        for lod in [0.0, 0.5, 1.0, 1.5, 7.0]:
            expected = sample_trilinear(gradient_image, texture.levels, (0.2, 0.8), lod)
            assert texture.evaluate((0.2, 0.8), lod) == expected

    def test_white_image_every_mode(self, white_image):
        """Test that the 4x4 white image samples to white under every mode."""
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        for mode in SamplerMode:
            texture = ImageTexture(mode, white_image)
            for uv in [(0.5, 0.5), (0.0, 1.0), (0.77, 0.12)]:
                for lod in [0.0, 0.5, 1.0, 4.0]:
                    color = texture.evaluate(uv, lod)
                    assert color.to_tuple() == pytest.approx((1.0, 1.0, 1.0))

    def test_single_texel_image_every_mode(self):
        """Test the 1x1 scenario: no levels, every mode returns the texel."""
        from src.texturing.core.color import Color
        from src.texturing.core.image import HDRImage
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        image = HDRImage.filled(1, 1, Color(0.2, 0.4, 0.6))
        for mode in SamplerMode:
            texture = ImageTexture(mode, image)
            assert texture.levels == ()
            for uv in [(0.0, 0.0), (0.5, 0.5), (1.0, 0.3)]:
                for lod in [0.0, 0.7, 3.0]:
                    color = texture.evaluate(uv, lod)
                    assert color.to_tuple() == pytest.approx((0.2, 0.4, 0.6))

    @pytest.mark.parametrize("width, height", [(0, 0), (0, 5), (5, 0)])
    def test_zero_area_image_every_mode(self, width, height):
        """Test the zero-area scenario: default color under every mode."""
        from src.texturing.core.color import DEFAULT_COLOR
        from src.texturing.core.image import HDRImage
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        for mode in SamplerMode:
            texture = ImageTexture(mode, HDRImage(width, height))
            assert texture.levels == ()
            assert texture.evaluate((0.5, 0.5), lod=1.0) == DEFAULT_COLOR


class TestImageTextureRevalidation:
    """Test explicit revalidation of cached data."""

    def test_in_place_mutation_needs_make_valid(self, white_image):
        """Test that evaluate reads the stale pyramid until make_valid runs."""
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        texture = ImageTexture(SamplerMode.TRILINEAR, white_image)
        texture.image.pixels[...] = 3.0

        # Reads never rebuild the pyramid implicitly
        stale = texture.evaluate((0.5, 0.5), lod=1.0)
        assert stale.to_tuple() == pytest.approx((1.0, 1.0, 1.0))

        texture.make_valid()
        fresh = texture.evaluate((0.5, 0.5), lod=1.0)
        assert fresh.to_tuple() == pytest.approx((3.0, 3.0, 3.0))

    def test_mode_change_needs_make_valid(self, white_image):
        """Test switching modes and revalidating builds or drops the pyramid."""
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        texture = ImageTexture(SamplerMode.BILINEAR, white_image)
        assert texture.levels == ()

        texture.sampler = SamplerMode.TRILINEAR
        texture.make_valid()
        assert len(texture.levels) == 2

        texture.sampler = SamplerMode.NEAREST
        texture.make_valid()
        assert texture.levels == ()

    def test_set_source_copies_and_rebuilds(self, white_image):
        """Test that set_source copies the image and regenerates the pyramid."""
        from src.texturing.core.color import Color
        from src.texturing.core.image import HDRImage
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        texture = ImageTexture(SamplerMode.TRILINEAR, white_image)
        replacement = HDRImage.filled(8, 2, Color(0.5, 0.5, 0.5))

        texture.set_source(replacement)
        replacement.fill(Color(9.0, 9.0, 9.0))

        assert (texture.width, texture.height) == (8, 2)
        assert [(level.width, level.height) for level in texture.levels] == [
            (4, 1),
            (2, 1),
            (1, 1),
        ]
        assert texture.evaluate((0.5, 0.5), lod=2.0).to_tuple() == pytest.approx(
            (0.5, 0.5, 0.5)
        )

    def test_failed_rebuild_keeps_previous_pyramid(self, white_image, monkeypatch):
        """Test that an allocation failure leaves the old pyramid in place."""
        from src.texturing.mipmap import generator
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        texture = ImageTexture(SamplerMode.TRILINEAR, white_image)
        previous = texture.levels

        monkeypatch.setattr(generator, "mipmap_level_count", lambda w, h: 7)
        with pytest.raises(RuntimeError):
            texture.make_valid()

        assert texture.levels == previous


class TestConstantTexture:
    """Test the constant-color texture."""

    def test_evaluate_is_color_times_scale(self):
        """Test that evaluation returns color * scale for any uv and lod."""
        from src.texturing.core.color import Color
        from src.texturing.textures.texture import ConstantTexture

        texture = ConstantTexture(Color(0.5, 1.0, 2.0), scale=2.0)

        for uv in [(0.0, 0.0), (0.5, 0.5), (-4.0, 9.0)]:
            for lod in [0.0, 3.0]:
                assert texture.evaluate(uv, lod) == Color(1.0, 2.0, 4.0)

    def test_defaults(self):
        """Test the default white color and unit scale."""
        from src.texturing.core.color import Color
        from src.texturing.textures.texture import ConstantTexture

        assert ConstantTexture().evaluate((0.5, 0.5)) == Color(1.0, 1.0, 1.0)


class TestTextureEquality:
    """Test texture comparisons."""

    def test_image_textures_compare_by_content(self, gradient_image):
        """Test that equal images in the same mode compare equal."""
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        a = ImageTexture(SamplerMode.BILINEAR, gradient_image)
        b = ImageTexture(SamplerMode.BILINEAR, gradient_image.copy())

        assert a == b
        assert not (a != b)

    def test_image_textures_differ_by_texel(self, gradient_image):
        """Test that a single changed texel breaks equality."""
        from src.texturing.core.color import Color
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        a = ImageTexture(SamplerMode.NEAREST, gradient_image)
        b = ImageTexture(SamplerMode.NEAREST, gradient_image)
        b.image.set(7, 3, Color(-1.0, -1.0, -1.0))

        assert a != b

    def test_image_textures_differ_by_mode(self, gradient_image):
        """Test that the same image in different modes is not equal."""
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        a = ImageTexture(SamplerMode.NEAREST, gradient_image)
        b = ImageTexture(SamplerMode.TRILINEAR, gradient_image)

        assert a != b

    def test_constant_textures_compare_color_and_scale(self):
        """Test constant texture equality on color and scale."""
        from src.texturing.core.color import Color
        from src.texturing.textures.texture import ConstantTexture

        assert ConstantTexture(Color(1.0, 0.0, 0.0), 2.0) == ConstantTexture(
            Color(1.0, 0.0, 0.0), 2.0
        )
        assert ConstantTexture(Color(1.0, 0.0, 0.0), 2.0) != ConstantTexture(
            Color(1.0, 0.0, 0.0), 1.0
        )
        assert ConstantTexture(Color(1.0, 0.0, 0.0)) != ConstantTexture(Color(0.0, 1.0, 0.0))

    def test_different_variants_are_never_equal(self):
        """Test that image and constant textures never compare equal."""
        from src.texturing.core.color import Color
        from src.texturing.core.image import HDRImage
        from src.texturing.textures.texture import ConstantTexture, ImageTexture, SamplerMode

        image = HDRImage.filled(1, 1, Color(1.0, 1.0, 1.0))

        assert ImageTexture(SamplerMode.NEAREST, image) != ConstantTexture()
        assert ConstantTexture() != ImageTexture(SamplerMode.NEAREST, image)

    def test_image_texture_is_unhashable(self, white_image):
        """Test that mutable image textures cannot be hashed."""
        from src.texturing.textures.texture import ImageTexture, SamplerMode

        with pytest.raises(TypeError):
            hash(ImageTexture(SamplerMode.NEAREST, white_image))

import dataclasses

import pytest

from hazel.textures import (
    MultiSample,
    RenderTargetKind,
    TextureBufferSpecification,
    TextureFormat,
    TextureRenderUsage,
    TextureType,
)


def test_specification_defaults():
    spec = TextureBufferSpecification(1280, 720)
    assert spec.width == 1280
    assert spec.height == 720
    assert spec.texture_type is TextureType.TEXTURE2D
    assert spec.format is TextureFormat.RGBA32
    assert spec.texture_render_usage is TextureRenderUsage.RENDER_TEXTURE
    assert spec.multi_sample is MultiSample.NONE


def test_specification_overrides():
    spec = TextureBufferSpecification(
        64,
        32,
        texture_type=TextureType.TEXTURECUBE,
        format=TextureFormat.DEPTH24STENCIL8,
        texture_render_usage=TextureRenderUsage.RENDER_TARGET,
        multi_sample=MultiSample.MSAA4X,
    )
    assert spec.format is TextureFormat.DEPTH24STENCIL8
    assert spec.multi_sample is MultiSample.MSAA4X
    assert spec.texture_type is TextureType.TEXTURECUBE


def test_specification_is_immutable():
    spec = TextureBufferSpecification(8, 8)
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.width = 16
    assert spec.width == 8


def test_multi_sample_order_matches_declaration():
    specs = [TextureBufferSpecification(1, 1, multi_sample=m) for m in MultiSample]
    assert [s.multi_sample.name for s in specs] == [
        "NONE",
        "MSAA2X",
        "MSAA4X",
        "MSAA8X",
        "MSAA16X",
    ]


def test_render_target_kind_order_matches_declaration():
    names = [RenderTargetKind(k.value).name for k in RenderTargetKind]
    assert names == ["SHADOWMAP", "OPAQUE_TEXTURE", "DIFFUSE_IBL"]
"""Texture descriptions, render target kinds and common colours."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MultiSample(Enum):
    NONE = 0
    MSAA2X = 1
    MSAA4X = 2
    MSAA8X = 3
    MSAA16X = 4


class TextureType(Enum):
    TEXTURE2D = 0
    TEXTURECUBE = 1
    TEXTURE2DARRAY = 2


class TextureFormat(Enum):
    RGBA32 = 0
    DEPTH24STENCIL8 = 1


class TextureRenderUsage(Enum):
    RENDER_TARGET = 0
    RENDER_TEXTURE = 1


class RenderTargetKind(Enum):
    SHADOWMAP = 0
    OPAQUE_TEXTURE = 1
    DIFFUSE_IBL = 2


@dataclass(frozen=True)
class TextureBufferSpecification:
    """Dimensions and format of a texture buffer."""

    width: int
    height: int
    texture_type: TextureType = TextureType.TEXTURE2D
    format: TextureFormat = TextureFormat.RGBA32
    texture_render_usage: TextureRenderUsage = TextureRenderUsage.RENDER_TEXTURE
    multi_sample: MultiSample = MultiSample.NONE


WHITE = (1.0, 1.0, 1.0, 1.0)
BLACK = (0.0, 0.0, 0.0, 1.0)
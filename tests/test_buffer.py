import pytest

from hazel.buffer import (
    BufferElement,
    BufferLayout,
    ShaderDataType,
    shader_data_type_size,
)

FLOAT_TYPES = [
    ShaderDataType.FLOAT,
    ShaderDataType.FLOAT2,
    ShaderDataType.FLOAT3,
    ShaderDataType.FLOAT4,
    ShaderDataType.MAT3,
    ShaderDataType.MAT4,
    ShaderDataType.INT,
    ShaderDataType.INT2,
    ShaderDataType.INT3,
    ShaderDataType.INT4,
]


@pytest.mark.parametrize("data_type", FLOAT_TYPES)
def test_four_byte_components(data_type):
    element = BufferElement(data_type, "a")
    assert element.size == 4 * element.component_count
    assert shader_data_type_size(data_type) == element.size


def test_pinned_sizes():
    assert shader_data_type_size(ShaderDataType.MAT4) == 64
    assert shader_data_type_size(ShaderDataType.BOOL) == 1
    assert shader_data_type_size(ShaderDataType.NONE) == 0


def test_unknown_type_raises():
    with pytest.raises(ValueError):
        shader_data_type_size("Float")


def test_none_has_no_component_count():
    with pytest.raises(ValueError):
        BufferElement(ShaderDataType.NONE, "nothing").component_count


def test_layout_offsets_and_stride():
    layout = BufferLayout(
        [
            BufferElement(ShaderDataType.FLOAT3, "a_Position"),
            BufferElement(ShaderDataType.FLOAT3, "a_Normal"),
            BufferElement(ShaderDataType.FLOAT3, "a_Tangent"),
            BufferElement(ShaderDataType.FLOAT2, "a_TexCoord"),
        ]
    )
    elements = layout.elements
    assert [e.name for e in layout] == ["a_Position", "a_Normal", "a_Tangent", "a_TexCoord"]
    assert elements[0].offset == 0
    for previous, current in zip(elements, elements[1:]):
        assert current.offset == previous.offset + previous.size
    assert layout.stride == sum(e.size for e in elements)
    assert len(layout) == 4


def test_empty_layout():
    layout = BufferLayout()
    assert layout.stride == 0
    assert len(layout) == 0
    assert list(layout) == []


def test_layout_does_not_mutate_inputs():
    first = BufferElement(ShaderDataType.FLOAT2, "a")
    second = BufferElement(ShaderDataType.FLOAT, "b", normalized=True)
    layout = BufferLayout([first, second])
    assert second.offset == 0
    assert layout.elements[1].offset == first.size
    assert layout.elements[1].normalized is True
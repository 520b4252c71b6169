import pytest

from hazel.shader import Shader, ShaderLibrary


class RecordingShader(Shader):
    def __init__(self, name):
        self._name = name
        self.uniforms = {}
        self.bound = False

    @property
    def name(self):
        return self._name

    def bind(self):
        self.bound = True

    def unbind(self):
        self.bound = False

    def set_int(self, name, value):
        self.uniforms[name] = value

    def set_float(self, name, value):
        self.uniforms[name] = value

    def set_float3(self, name, value):
        self.uniforms[name] = tuple(value)

    def set_float4(self, name, value):
        self.uniforms[name] = tuple(value)

    def set_mat4(self, name, value):
        self.uniforms[name] = value

    def set_mat3(self, name, value):
        self.uniforms[name] = value


def test_shader_is_abstract():
    with pytest.raises(TypeError):
        Shader()


def test_add_under_own_name():
    library = ShaderLibrary()
    shader = RecordingShader("Texture")
    library.add(shader)
    assert library.get("Texture") is shader
    assert library.exists("Texture")
    assert "Texture" in library


def test_add_under_explicit_name():
    library = ShaderLibrary()
    shader = RecordingShader("Texture")
    library.add(shader, "Ground")
    assert library.get("Ground") is shader
    assert not library.exists("Texture")


def test_duplicate_name_raises():
    library = ShaderLibrary()
    library.add(RecordingShader("Flat"))
    with pytest.raises(ValueError):
        library.add(RecordingShader("Flat"))


def test_missing_shader_raises():
    library = ShaderLibrary()
    with pytest.raises(KeyError):
        library.get("missing")
    assert "missing" not in library
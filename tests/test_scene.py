import math

import numpy as np
import pytest

from hazel.camera import Camera
from hazel.scene import (
    CameraComponent,
    Entity,
    Scene,
    SpriteRendererComponent,
    TagComponent,
    TransformComponent,
)


def test_default_transform_is_identity():
    assert np.allclose(TransformComponent().transform(), np.identity(4))


def test_translation_in_last_column():
    t = TransformComponent(translation=(1.0, 2.0, 3.0))
    m = t.transform()
    assert np.allclose(m[:3, 3], [1.0, 2.0, 3.0])
    assert np.allclose(m[:3, :3], np.identity(3))


def test_scale_on_diagonal():
    t = TransformComponent(scale=(2.0, 3.0, 4.0))
    assert np.allclose(np.diag(t.transform())[:3], [2.0, 3.0, 4.0])


def test_rotation_about_z_maps_x_to_y():
    t = TransformComponent(rotation=(0.0, 0.0, 90.0))
    v = t.transform() @ np.array([1.0, 0.0, 0.0, 1.0])
    assert np.allclose(v[:3], [0.0, 1.0, 0.0])


def test_rotation_about_y_maps_z_to_x():
    t = TransformComponent(rotation=(0.0, 90.0, 0.0))
    v = t.transform() @ np.array([0.0, 0.0, 1.0, 1.0])
    assert np.allclose(v[:3], [1.0, 0.0, 0.0])


def test_rotation_preserves_length():
    t = TransformComponent(rotation=(30.0, 45.0, 60.0))
    v = t.transform() @ np.array([1.0, 2.0, 2.0, 1.0])
    assert math.isclose(np.linalg.norm(v[:3]), 3.0)


def test_sprite_default_color_is_white():
    assert SpriteRendererComponent().color == (1.0, 1.0, 1.0, 1.0)


def test_create_entity_default_tag():
    scene = Scene()
    entity = scene.create_entity()
    assert entity.get_component(TagComponent).tag == "Entity"
    assert entity.has_component(TransformComponent)


def test_create_entity_named():
    scene = Scene()
    entity = scene.create_entity("Player")
    assert entity.get_component(TagComponent).tag == "Player"


def test_entities_are_distinct():
    scene = Scene()
    a = scene.create_entity("a")
    b = scene.create_entity("b")
    assert a != b
    assert int(a) != int(b)
    assert len(scene) == 2


def test_add_and_get_component():
    scene = Scene()
    entity = scene.create_entity()
    sprite = SpriteRendererComponent((0.5, 0.25, 0.0, 1.0))
    returned = entity.add_component(sprite)
    assert returned is sprite
    assert entity.get_component(SpriteRendererComponent) is sprite


def test_add_duplicate_raises():
    entity = Scene().create_entity()
    with pytest.raises(ValueError):
        entity.add_component(TransformComponent())


def test_get_missing_raises():
    entity = Scene().create_entity()
    with pytest.raises(KeyError):
        entity.get_component(SpriteRendererComponent)


def test_remove_component():
    entity = Scene().create_entity()
    tag = entity.remove_component(TagComponent)
    assert tag.tag == "Entity"
    assert not entity.has_component(TagComponent)
    with pytest.raises(KeyError):
        entity.remove_component(TagComponent)


def test_view_filters_by_components():
    scene = Scene()
    a = scene.create_entity("a")
    b = scene.create_entity("b")
    b.add_component(SpriteRendererComponent())
    assert list(scene.view(TransformComponent)) == [a, b]
    assert list(scene.view(TransformComponent, SpriteRendererComponent)) == [b]


def test_null_entity():
    entity = Entity()
    assert not entity
    assert int(entity) == 0xFFFFFFFF
    with pytest.raises(ValueError):
        entity.has_component(TagComponent)


def test_entity_equality_depends_on_scene():
    first = Scene()
    second = Scene()
    a = first.create_entity()
    b = second.create_entity()
    assert int(a) == int(b)
    assert a != b
    assert Entity(int(a), first) == a


def test_camera_component_holds_camera():
    cam = Camera(math.radians(45.0), 16.0, 9.0, 0.1, 100.0)
    entity = Scene().create_entity()
    entity.add_component(CameraComponent(cam))
    assert entity.get_component(CameraComponent).camera is cam


def test_on_update_keeps_entities():
    scene = Scene()
    entity = scene.create_entity("x")
    scene.on_update(0.016)
    assert list(scene.view(TagComponent)) == [entity]
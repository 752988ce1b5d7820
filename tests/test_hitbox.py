from wireframe3d.hitbox import Hitbox, HitboxType


def test_default_hitbox_is_unit_box():
    box = Hitbox()
    assert (box.x, box.y, box.z) == (1.0, 1.0, 1.0)
    assert box.kind is HitboxType.DEFAULT
    assert box.points == []


def test_dimensions_are_kept():
    box = Hitbox(3.0, 4.0, 5.0)
    assert (box.x, box.y, box.z) == (3.0, 4.0, 5.0)
    assert box.kind is HitboxType.DEFAULT


def test_kind_can_be_given():
    box = Hitbox(2.0, 2.0, 2.0, kind=HitboxType.SPHERE)
    assert box.kind is HitboxType.SPHERE


def test_set_points_stores_copy():
    source = ["a", "b"]
    box = Hitbox()
    box.set_points(source)
    source.append("c")
    assert box.points == ["a", "b"]


def test_set_points_accepts_generator():
    box = Hitbox()
    box.set_points(label for label in ("p", "q", "r"))
    assert box.points == ["p", "q", "r"]


def test_hitboxes_do_not_share_points():
    first = Hitbox()
    second = Hitbox()
    first.set_points(["x"])
    assert second.points == []


def test_kinds_are_distinct():
    kinds = (HitboxType.DEFAULT, HitboxType.SPHERE, HitboxType.CUSTOM)
    boxes = [Hitbox(1.0, 1.0, 1.0, kind=kind) for kind in kinds]
    assert [box.kind for box in boxes] == list(kinds)
    assert len({box.kind for box in boxes}) == 3
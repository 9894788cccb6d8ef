import pytest

from flappy_arcade.physics import ArcadePhysics, Body


@pytest.fixture
def world():
    return ArcadePhysics(800, 600, 900.0)


def test_gravity_accelerates_then_moves(world):
    body = world.add_body(100, 100, 10, 10)

    world.step(0.5)

    assert body.velocity_y == pytest.approx(450.0)
    assert body.y == pytest.approx(325.0)


def test_bodies_without_gravity_keep_constant_velocity(world):
    body = world.add_body(500, 100, 10, 10)
    body.allow_gravity = False
    body.velocity_x = -220.0

    world.step(1.0)

    assert body.x == pytest.approx(280.0)
    assert body.y == pytest.approx(100.0)
    assert body.velocity_y == 0.0


def test_static_bodies_do_not_move(world):
    ground = world.add_static_body(400, 568, 800, 64)

    world.step(1.0)

    assert (ground.x, ground.y) == (400.0, 568.0)


def test_world_bounds_clamp_the_body(world):
    body = world.add_body(100, 20, 10, 10)
    body.collide_world_bounds = True
    body.velocity_y = -1000.0
    body.allow_gravity = False

    world.step(1.0)

    assert body.top == 0
    assert body.velocity_y == 0.0


def test_collider_pushes_body_out_and_calls_back(world):
    ground = world.add_static_body(400, 568, 800, 64)
    body = world.add_body(100, 520, 20, 20)
    hits = []
    world.add_collider(body, ground, lambda a, b: hits.append((a, b)))

    world.step(0.1)

    assert hits == [(body, ground)]
    assert body.bottom == pytest.approx(ground.top)
    assert body.velocity_y == 0.0


def test_overlap_calls_back_without_moving(world):
    body = world.add_body(100, 100, 20, 20)
    body.allow_gravity = False
    group = world.add_group()
    other = group.create(105, 100, 20, 20)
    other.allow_gravity = False
    hits = []
    world.add_overlap(body, group, lambda a, b: hits.append(b))

    world.step(0.0)

    assert hits == [other]
    assert body.x == 100.0


def test_touching_edges_do_not_overlap():
    assert not Body(0, 0, 10, 10).overlaps(Body(10, 0, 10, 10))
    assert Body(0, 0, 10, 10).overlaps(Body(9, 0, 10, 10))


def test_destroyed_bodies_are_skipped_and_pruned(world):
    body = world.add_body(100, 100, 20, 20)
    body.allow_gravity = False
    zone = world.add_body(100, 100, 20, 20)
    zone.allow_gravity = False
    hits = []
    world.add_overlap(body, zone, lambda a, b: hits.append(b))

    zone.destroy()
    zone.destroy()
    world.step(0.0)

    assert hits == []
    assert zone not in world.bodies
    assert world.colliders == []


def test_overlap_that_destroys_its_zone_fires_once(world):
    body = world.add_body(100, 100, 20, 20)
    body.allow_gravity = False
    zone = world.add_body(100, 100, 20, 20)
    zone.allow_gravity = False
    hits = []

    def on_overlap(a, b):
        hits.append(b)
        b.destroy()

    world.add_overlap(body, zone, on_overlap)
    world.step(0.0)
    world.step(0.0)

    assert hits == [zone]


def test_group_clear_destroys_members(world):
    group = world.add_group()
    members = [group.create(i * 50, 0, 10, 10) for i in range(3)]

    group.clear()

    assert len(group) == 0
    assert all(not body.active for body in members)

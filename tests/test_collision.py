from sidescroller.game.collision import EffectKind, detect, player_hitbox, rects_overlap
from sidescroller.game.entities import Entity, EntityKind, Player, Rect


def test_overlap_is_inclusive_on_touching_edges():
    a = Rect(0, 0, 10, 10)
    assert rects_overlap(a, Rect(10, 0, 5, 5))
    assert rects_overlap(a, Rect(-5, 10, 5, 5))
    assert not rects_overlap(a, Rect(10.01, 0, 5, 5))
    assert not rects_overlap(a, Rect(0, -5.01, 5, 5))


def test_overlap_is_symmetric():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert rects_overlap(a, b) and rects_overlap(b, a)


def test_player_hitbox_rises_with_jump(settings):
    grounded = player_hitbox(Player(x=50), settings)
    assert (grounded.x, grounded.y, grounded.width, grounded.height) == (50, 280, 60, 80)

    airborne = player_hitbox(Player(x=50, vertical_offset=100), settings)
    assert airborne.y == 180


def test_jumping_clears_a_ground_obstacle(settings):
    obstacle = Entity(x=70, y=320, width=40, height=40)
    airborne = player_hitbox(Player(x=50, vertical_offset=100), settings)
    assert detect(airborne, [obstacle]) == []


def test_power_ups_collected_and_obstacle_hit(settings):
    box = player_hitbox(Player(x=50), settings)
    first = Entity(x=60, y=335, width=25, height=25, kind=EntityKind.POWER_UP)
    second = Entity(x=80, y=335, width=25, height=25, kind=EntityKind.POWER_UP)
    far = Entity(x=600, y=320, width=40, height=40)

    effects = detect(box, [first, far, second])
    assert [e.kind for e in effects] == [EffectKind.COLLECT, EffectKind.COLLECT]
    assert [e.entity for e in effects] == [first, second]


def test_hit_stops_the_scan(settings):
    box = player_hitbox(Player(x=50), settings)
    obstacle = Entity(x=90, y=320, width=40, height=40)
    later = Entity(x=60, y=335, width=25, height=25, kind=EntityKind.POWER_UP)

    effects = detect(box, [obstacle, later])
    assert [e.kind for e in effects] == [EffectKind.HIT]


def test_detect_does_not_mutate_entities(settings):
    box = player_hitbox(Player(x=50), settings)
    entities = [Entity(x=60, y=335, width=25, height=25, kind=EntityKind.POWER_UP)]
    detect(box, entities)
    assert len(entities) == 1

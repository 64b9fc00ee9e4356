import pytest

from mujinplatformer.characters import (
    LivingCharacter,
    Meter,
    Projectile,
    Score,
    Slice,
    Sword,
)
from mujinplatformer.collision import Rect


def test_meter_fraction_half():
    assert Meter(value=50.0).fraction() == pytest.approx(0.5)


def test_meter_bar_width_full_is_whole_width():
    assert Meter().bar_width(40, 2) == pytest.approx(80)


def test_meter_bar_width_scales_with_fraction():
    full = Meter().bar_width(100, 1)
    part = Meter(value=25.0).bar_width(100, 1)
    assert part == pytest.approx(full * Meter(value=25.0).fraction())


def test_damage_until_dead():
    character = LivingCharacter()
    results = []
    while not character.is_dead():
        results.append(character.apply_damage(10))
    assert results[-1] is True
    assert all(result is False for result in results[:-1])


def test_defence_halves_damage_at_one_hundred():
    plain = LivingCharacter(defence=0)
    armoured = LivingCharacter(defence=100)
    plain.apply_damage(20)
    armoured.apply_damage(20)
    plain_loss = plain.health.maximum - plain.health.value
    armoured_loss = armoured.health.maximum - armoured.health.value
    assert armoured_loss == pytest.approx(plain_loss / 2)


def test_took_damage_cleared_by_begin_frame():
    character = LivingCharacter()
    character.apply_damage(1)
    assert character.took_damage is True
    character.begin_frame()
    assert character.took_damage is False


def test_enemy_has_no_mana_or_stamina():
    enemy = LivingCharacter(is_player=False)
    assert enemy.mana is None and enemy.stamina is None
    assert enemy.apply_mana(10) is False
    assert enemy.exhaust(10) is False
    assert enemy.recover(10) is False


def test_player_exhaust_refuses_when_it_would_run_out():
    player = LivingCharacter(is_player=True)
    before = player.stamina.value
    assert player.exhaust(before) is True
    assert player.stamina.value == before


def test_player_exhaust_spends_stamina():
    player = LivingCharacter(is_player=True)
    before = player.stamina.value
    assert player.exhaust(10) is False
    assert player.stamina.value == pytest.approx(before - 10)


def test_recover_full_then_after_spending():
    player = LivingCharacter(is_player=True)
    assert player.recover(1) is True
    player.exhaust(10)
    tired = player.stamina.value
    assert player.recover(1) is False
    assert player.stamina.value == pytest.approx(tired + 1)


def test_mana_reports_empty_only_after_it_is_spent():
    player = LivingCharacter(is_player=True)
    outcomes = [player.apply_mana(50) for _ in range(3)]
    assert outcomes == [False, False, True]


def test_score_labels():
    score = Score()
    assert score.label() == "score 0"
    assert score.add(100) == 100
    assert score.label() == "score100"


def test_sword_hitbox_in_front_when_facing_right():
    sword = Sword()
    collider = Rect(10, 20, 30, 40)
    hitbox = sword.update_hitbox(collider, flipped=False)
    assert hitbox.x == collider.right
    assert hitbox.y == collider.y
    assert (hitbox.w, hitbox.h) == (48, 48)


def test_sword_hitbox_behind_when_flipped():
    sword = Sword()
    collider = Rect(100, 20, 30, 40)
    hitbox = sword.update_hitbox(collider, flipped=True)
    assert hitbox.right == collider.x


def test_sword_attack_makes_slice():
    sword = Sword(enemy=True)
    sword.update_hitbox(Rect(0, 0, 10, 10), flipped=False)
    slice_ = sword.attack()
    assert slice_ == Slice(sword.hitbox, 10, True)


def test_sword_level_up_raises_damage():
    sword = Sword()
    base = sword.attack().damage
    sword.level_up(5)
    assert sword.attack().damage == base + 5


def test_projectile_expires_past_range():
    projectile = Projectile(200, 2, (1.0, 0.0))
    outcomes = [projectile.advance(1.0) for _ in range(100)]
    assert not any(outcomes)
    assert projectile.distance == 200
    assert projectile.advance(1.0) is True
    assert projectile.expired


def test_projectile_fractional_steps_truncate():
    projectile = Projectile(10, 1, (0.0, 1.0))
    for _ in range(50):
        projectile.advance(0.5)
    assert projectile.distance == 0
    assert projectile.velocity == (0.0, 1.0)
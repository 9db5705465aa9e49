"""Tests for the engine loop: modes, spawning, economy, time dilation and drawing."""

import pytest

from conftest import FixedRandom, RecordingSurface, make_engine, place_snake
from ouroboros.components import Mode
from ouroboros.config import MIN_ATTACK_SPEED, FRAME_TIME
from ouroboros.engine import Engine
from ouroboros.weapons import MagicWand, Garlic, Orbitals


class TestModes:

    def test_starts_in_menu_and_does_not_simulate(self):
        engine = Engine(rng=FixedRandom())
        assert engine.mode is Mode.MENU
        engine.step(1.0)
        assert engine.game_time == 0

    def test_start_enters_playing(self):
        engine = Engine(rng=FixedRandom())
        engine.start()
        assert engine.running
        assert engine.mode is Mode.PLAYING
        engine.stop()
        assert not engine.running

    def test_game_over_fires_callback_once(self):
        calls = []
        engine = make_engine(on_game_over=lambda: calls.append('over'))
        engine.player.hp = 0
        engine.step(FRAME_TIME)
        engine.step(FRAME_TIME)
        assert engine.mode is Mode.GAMEOVER
        assert calls == ['over']

    def test_contact_death_ends_game(self):
        engine = make_engine()
        engine.player.hp = 5
        place_snake(engine, 0, 0, length=1, hp=1000, damage=10)
        engine.step(FRAME_TIME)
        assert engine.player.hp == 0
        assert engine.mode is Mode.GAMEOVER

    def test_level_up_pauses_with_choices(self):
        calls = []
        engine = make_engine(on_level_up=lambda: calls.append('level'))
        engine.player.gain_exp(30)
        engine.step(FRAME_TIME)

        assert engine.mode is Mode.LEVELUP
        assert calls == ['level']
        assert len(engine.level_up_choices) == 3

        frozen = engine.game_time
        engine.step(FRAME_TIME)
        assert engine.game_time == frozen

        engine.choose_upgrade(engine.level_up_choices[0])
        assert engine.mode is Mode.PLAYING
        assert engine.level_up_choices == []

    def test_choice_ignored_after_game_over(self):
        engine = make_engine()
        engine.player.gain_exp(10)
        engine.step(FRAME_TIME)
        choice = engine.level_up_choices[0]
        engine.mode = Mode.GAMEOVER
        engine.choose_upgrade(choice)
        assert engine.mode is Mode.GAMEOVER

    def test_restart_without_surface_is_ignored(self):
        engine = make_engine()
        engine.step(1.0)
        engine.restart()
        assert engine.game_time == 1.0

    def test_restart_resets_everything(self, surface):
        engine = make_engine(surface=surface)
        engine.add_weapon(Garlic())
        place_snake(engine, 300, 0)
        engine.player.hp = 0
        engine.step(FRAME_TIME)
        assert engine.mode is Mode.GAMEOVER

        engine.restart()
        assert engine.mode is Mode.PLAYING
        assert engine.game_time == 0
        assert engine.snakes == []
        assert engine.player.hp == engine.player.max_hp
        assert [type(w) for w in engine.weapons] == [MagicWand]
        assert engine.boss_count == 0


class TestSpawning:

    def test_regular_spawn_after_interval(self):
        engine = make_engine()
        for _ in range(125):
            engine.step(FRAME_TIME)
        assert len(engine.snakes) == 1
        assert not engine.snakes[0].is_boss

    def test_long_stall_queues_every_boss(self):
        engine = make_engine()
        engine.step(150.0)
        bosses = [snake for snake in engine.snakes if snake.is_boss]
        assert engine.boss_count == 2
        assert len(bosses) == 2
        assert engine.next_boss_time == 180

    def test_second_boss_is_bigger(self):
        engine = make_engine()
        engine.step(150.0)
        first, second = [s for s in engine.snakes if s.is_boss]
        assert len(second.segments) == len(first.segments) + 2


class TestRoster:

    def test_add_existing_kind_levels_up(self):
        engine = make_engine()
        engine.add_weapon(MagicWand())
        assert len(engine.weapons) == 1
        assert engine.get_weapon_level(MagicWand.id) == 2

    def test_weapon_level_of_missing_kind(self):
        engine = make_engine()
        assert engine.get_weapon_level(Garlic.id) == 0
        assert not engine.has_weapon(Garlic.id)


class TestEconomy:

    def test_diversity_tax_non_increasing_and_floored(self):
        engine = make_engine()
        speeds = [engine.effective_attack_speed(kinds) for kinds in range(0, 120)]
        assert all(a >= b for a, b in zip(speeds, speeds[1:]))
        assert speeds[0] == speeds[1] == 1.0
        assert speeds[-1] == MIN_ATTACK_SPEED

    def test_penalty_tracks_roster(self):
        engine = make_engine()
        assert engine.attack_penalty_multiplier() == 1.0
        engine.add_weapon(Garlic())
        assert engine.attack_penalty_multiplier() == pytest.approx(1.12)
        assert engine.attack_penalty_multiplier(kinds=4) == pytest.approx(1.36)

    def test_cooldown_rounding_and_floor(self):
        engine = make_engine()
        engine.add_weapon(Garlic())
        ctx = engine.build_tick_context()
        assert ctx.cooldown(60) == 67
        assert ctx.cooldown(1) == 3


class TestTimeDilation:

    def test_later_deadline_wins_latest_multipliers_win(self):
        engine = make_engine()
        engine.activate_time_dilation(1000, 0.5, 0.7)
        engine.activate_time_dilation(500, 0.6, 0.8)
        assert engine.time_dilation_until == 1000
        assert engine.time_dilation_enemy_speed_mul == 0.6
        assert engine.time_dilation_attack_mul == 0.8

    def test_multipliers_reset_after_expiry(self):
        engine = make_engine()
        engine.activate_time_dilation(1000, 0.5, 0.7)
        engine.step(0.5)
        assert engine.time_dilation_enemy_speed_mul == 0.5
        engine.step(0.6)
        assert engine.time_dilation_enemy_speed_mul == 1.0
        assert engine.time_dilation_attack_mul == 1.0

    def test_slows_snakes(self):
        engine = make_engine()
        engine.player.x = 10000
        snake = place_snake(engine, 0, 0, length=1, speed=2.0)
        engine.activate_time_dilation(5000, 0.5, 1.0)
        engine.step(FRAME_TIME)
        assert snake.segments[0].x == pytest.approx(1.0)


class TestView:

    def test_viewport_fallback_without_surface(self):
        engine = make_engine()
        assert engine.viewport == (1280, 720)
        engine.player.x = 1000
        assert engine.camera == (1000 - 640, -360)

    def test_viewport_from_surface(self):
        engine = make_engine(surface=RecordingSurface(width=100, game_height=30))
        assert engine.viewport == (1000, 600)

    def test_draw_without_surface_is_noop(self):
        make_engine().draw()

    def test_layer_order(self, surface, monkeypatch):
        engine = make_engine(surface=surface)
        order = []

        class Layer:
            def __init__(self, tag):
                self.tag = tag

            def draw(self, *args):
                order.append(self.tag)

        engine.gems = [Layer('gem')]
        engine.snakes = [Layer('snake')]
        engine.weapons = [Layer('weapon')]
        engine.particles = [Layer('particle')]
        engine.damage_numbers = [Layer('number')]
        monkeypatch.setattr(engine.player, 'draw', lambda *args: order.append('player'))
        monkeypatch.setattr(engine, '_draw_grid', lambda camera: order.append('grid'))

        engine.draw()
        assert order == ['grid', 'gem', 'snake', 'weapon', 'player', 'particle', 'number']

    def test_tick_steps_and_draws(self, surface):
        engine = make_engine(surface=surface)
        engine.tick(FRAME_TIME)
        assert engine.frame == 1
        assert any(call[3] == '@' for call in surface.calls if call[0] == 'put')

    def test_drawing_does_not_change_outcome(self, surface):
        drawn = make_engine(surface=surface)
        plain = make_engine()
        for engine in (drawn, plain):
            place_snake(engine, 150, 0, length=4, hp=30, speed=1.0)
            engine.add_weapon(Orbitals())
        for _ in range(90):
            drawn.tick(FRAME_TIME)
            plain.tick(FRAME_TIME)
        assert drawn.snapshot().hp == plain.snapshot().hp
        assert ([len(s.segments) for s in drawn.snakes]
                == [len(s.segments) for s in plain.snakes])


class TestSnapshot:

    def test_snapshot_reflects_state(self):
        engine = make_engine()
        engine.add_weapon(Garlic())
        engine.step(150.0)
        snap = engine.snapshot()
        assert snap.mode is Mode.PLAYING
        assert snap.boss_count == 2
        assert [info.id for info in snap.weapons] == [MagicWand.id, Garlic.id]
        assert snap.attack_penalty == pytest.approx(1.12)

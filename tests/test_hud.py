"""Tests for the terminal surface and the HUD screens."""

from conftest import make_engine
from ouroboros.hud import render_ui, render_title_screen, render_level_up, render_game_over_screen
from ouroboros.render import GameRenderer, HUD_ROWS, put_world_char


class FakeTerminal:
    """Just enough of blessed.Terminal for the double buffer."""
    width = 100
    height = 30
    normal = ''

    def move_xy(self, x, y):
        return f'<{x},{y}>'

    def color(self, c):
        return ''

    def on_color(self, c):
        return ''


def _screen_text(renderer):
    return '\n'.join(''.join(cell.char for cell in row) for row in renderer.buffer.back)


def _renderer():
    renderer = GameRenderer(FakeTerminal())
    renderer.begin_frame()
    return renderer


class TestRenderer:

    def test_game_area_excludes_hud(self):
        renderer = _renderer()
        assert renderer.game_height == 30 - HUD_ROWS
        renderer.put(1, renderer.game_height, 'X')
        assert 'X' not in _screen_text(renderer)

    def test_only_changed_cells_emitted(self):
        renderer = _renderer()
        renderer.put(3, 4, '@')
        first = renderer.end_frame()
        assert '<3,4>@' in first

        renderer.begin_frame()
        renderer.put(3, 4, '@')
        assert renderer.end_frame() == ''

    def test_world_projection(self):
        renderer = _renderer()
        put_world_char(renderer, 55, 45, (0, 0), '*', 7)
        assert renderer.buffer.back[2][5].char == '*'

    def test_braille_dots_merge_into_one_glyph(self):
        renderer = _renderer()
        renderer.put_braille_pixel(2.0, 1.0, 9)
        renderer.put_braille_pixel(2.5, 1.25, 9)
        renderer.end_frame()
        assert renderer.buffer.front[1][2].char == chr(0x2800 | 0x01 | 0x10)

    def test_braille_never_covers_text(self):
        renderer = _renderer()
        renderer.put(2, 1, '@')
        renderer.put_braille_pixel(2.0, 1.0, 9)
        renderer.end_frame()
        assert renderer.buffer.front[1][2].char == '@'


class TestScreens:

    def test_hud_shows_vitals_and_roster(self):
        renderer = _renderer()
        render_ui(renderer, make_engine().snapshot())
        text = _screen_text(renderer)
        assert 'OUROBOROS' in text
        assert '100/100' in text
        assert 'Magic Wand 1' in text

    def test_title_prompt(self):
        renderer = _renderer()
        render_title_screen(renderer, frame=0)
        assert 'PRESS ANY KEY' in _screen_text(renderer)

    def test_level_up_lists_choices(self):
        engine = make_engine()
        engine.player.gain_exp(10)
        engine.step(1 / 60)
        renderer = _renderer()
        render_level_up(renderer, engine.level_up_choices, frame=0)
        text = _screen_text(renderer)
        for i, choice in enumerate(engine.level_up_choices):
            assert f'[{i + 1}]' in text
            assert choice.title in text

    def test_game_over_stats(self):
        renderer = _renderer()
        render_game_over_screen(renderer, make_engine().snapshot(), frame=0)
        assert 'LEVEL REACHED: 1' in _screen_text(renderer)

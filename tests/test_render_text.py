"""
Tests for the plain-text frame renderer.
"""

from dog_pacman.pacman_core.render_text import (
    CONTROLS_TEXT,
    HINT_ROW,
    SpriteDraw,
    goal_hint,
    hud_text,
    rasterize,
    render_text,
)

POOP = 0


def frame_lines(game):
    return render_text(game.snapshot(), game.config, game.catalog).splitlines()


class TestRenderText:
    """Test what a frame shows and where."""

    def test_hud_on_first_line(self, quiet_game):
        lines = frame_lines(quiet_game)

        assert lines[0].startswith("Lives: 5 | Score: 0 | Speed: 1")
        assert lines[0].rstrip().endswith(CONTROLS_TEXT)

    def test_goal_hint(self, quiet_game, catalog):
        lines = frame_lines(quiet_game)

        assert goal_hint(catalog) == "Eat only POOP, avoid other objects!"
        assert goal_hint(catalog) in lines[HINT_ROW]

    def test_frame_size(self, quiet_game, config):
        lines = frame_lines(quiet_game)

        assert len(lines) == config.player.y + config.player.height + 1
        assert all(len(line) == config.screen_width for line in lines)

    def test_closed_dog_at_player_position(self, quiet_game, config):
        lines = frame_lines(quiet_game)
        x, y = config.player.x, config.player.y

        for dy, sprite_line in enumerate(config.player.sprite_closed):
            assert lines[y + dy][x:x + len(sprite_line)] == sprite_line

    def test_open_dog(self, quiet_game):
        quiet_game.open_mouth()
        lines = frame_lines(quiet_game)

        assert lines[12][10:17] == " (___O "

    def test_object_drawn_on_player_row(self, quiet_game):
        quiet_game.place_object(POOP, 40)
        lines = frame_lines(quiet_game)

        assert lines[10][40:44] == " @@ "
        assert lines[11][40:44] == "@@@@"

    def test_partially_offscreen_object_clipped(self, quiet_game):
        quiet_game.place_object(POOP, -2)
        lines = frame_lines(quiet_game)

        assert lines[10][:2] == "@ "
        assert lines[11][:2] == "@@"

    def test_three_line_object(self, quiet_game, config):
        """Every sprite line of a tall object lands inside the frame."""
        quiet_game.place_object(2, 50)    # cat, three lines
        lines = frame_lines(quiet_game)

        assert len(lines) == config.player.y + 3 + 1
        assert lines[12][50:57] == " > ^ < "

    def test_hud_tracks_score_and_speed(self, quiet_game):
        quiet_game.scorer.add_bonus(12)
        assert hud_text(quiet_game.snapshot()) == "Lives: 5 | Score: 12 | Speed: 2"


class TestRasterize:
    """Test grid drawing."""

    def test_later_sprites_draw_over_earlier(self):
        sprites = [SpriteDraw(0, 0, ("aaaa",), "white"), SpriteDraw(1, 0, ("bb",), "white")]

        assert rasterize(sprites, 4, 1) == ["abba"]

    def test_clips_all_edges(self):
        sprites = [SpriteDraw(-1, -1, ("xyz", "uvw", "rst"), "white")]

        assert rasterize(sprites, 2, 2) == ["vw", "st"]

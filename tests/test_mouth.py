"""
Tests for the mouth timer.
"""

from dog_pacman.pacman_core.mouth import MouthState


class TestMouthState:
    """Test open/auto-close transitions."""

    def test_starts_closed(self):
        mouth = MouthState(8)

        assert not mouth.is_open
        assert mouth.ticks_remaining == 0

    def test_closes_after_exact_duration(self):
        """Open for exactly `duration` ticks, closing on the last one."""
        mouth = MouthState(8)
        assert mouth.open()

        closed_on = None
        for i in range(1, 9):
            if mouth.tick():
                closed_on = i
                break
            assert mouth.is_open

        assert closed_on == 8
        assert not mouth.is_open

    def test_reopen_does_not_extend(self):
        """An open request while open is ignored."""
        mouth = MouthState(8)
        mouth.open()
        for _ in range(5):
            mouth.tick()

        assert not mouth.open()
        assert mouth.ticks_remaining == 3

    def test_tick_while_closed_is_noop(self):
        mouth = MouthState(8)

        assert not mouth.tick()
        assert mouth.ticks_remaining == 0

    def test_reset_closes(self):
        mouth = MouthState(8)
        mouth.open()
        mouth.reset()

        assert not mouth.is_open
        assert mouth.open()

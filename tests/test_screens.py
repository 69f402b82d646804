"""
Tests for the instructions text.
"""

from dog_pacman.pacman_core.screens import instruction_lines


class TestInstructionLines:
    """Test the page shown before the game."""

    def test_every_kind_listed(self, catalog):
        lines = instruction_lines(catalog)

        for kind in catalog:
            matching = [line for line in lines if kind.name.upper() in line]
            assert len(matching) == 1
            if kind.is_edible:
                assert "- EAT!" in matching[0]
            else:
                assert "DON'T EAT!" in matching[0]

    def test_controls_and_rules(self, catalog):
        text = "\n".join(instruction_lines(catalog))

        assert "SPACE - open mouth" in text
        assert "ESC/Q - quit" in text
        assert "+1 point for each poop eaten" in text
        assert text.endswith("Press any key to start...")

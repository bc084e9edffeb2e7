"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from dragoncrow.config import Config, load_config


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        """Test default configuration values."""
        config = load_config(None)

        assert config.game.num_players == 4
        assert config.game.cards_per_player == 6
        assert config.game.num_discard_piles == 2
        assert config.game.deal_face_down
        assert config.deck.copies_per_type == 4
        assert config.deck.total_cards == 52
        assert len(config.deck.dragon_assets) == len(config.deck.dragons)
        assert len(config.deck.crow_assets) == len(config.deck.crows)

    def test_missing_file(self, tmp_path):
        """Test a missing file falls back to defaults."""
        config = load_config(tmp_path / "nope.yaml")
        assert config == Config()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_yaml_overrides(self, tmp_path):
        """Test values from YAML override the defaults."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "game:\n"
            "  seed: 7\n"
            "  deal_delay: 0.25\n"
            "deck:\n"
            "  copies_per_type: 2\n"
            "  crows:\n"
            "    - name: Scout Crow\n"
            "      value: 12\n"
            "logging:\n"
            "  level: DEBUG\n"
        )

        config = load_config(str(path))

        assert config.game.seed == 7
        assert config.game.deal_delay == 0.25
        assert config.deck.copies_per_type == 2
        assert [c.value for c in config.deck.crows] == [12]
        assert config.logging.level == "DEBUG"
        # Untouched sections keep their defaults
        assert config.game.num_players == 4
        assert len(config.deck.dragons) == 10

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("game:\n  num_players: lots\n")
        with pytest.raises(ValidationError):
            load_config(path)

    @pytest.mark.parametrize(
        "section",
        [
            "game:\n  num_discard_piles: 0\n",
            "game:\n  cards_per_player: 5\n",
            "game:\n  cards_per_player: 0\n",
            "game:\n  num_players: 0\n",
            "game:\n  deal_delay: -1\n",
            "deck:\n  copies_per_type: 0\n",
        ],
    )
    def test_unplayable_values_rejected(self, tmp_path, section):
        """Test table shapes that cannot be played fail validation."""
        path = tmp_path / "bad.yaml"
        path.write_text(section)
        with pytest.raises(ValidationError):
            load_config(path)

"""
Unit Tests for Engine Configuration
"""

import pytest

from checkers_engine.board import Side
from checkers_engine.config import EngineConfig, ScoringMode, SeedPolicy


def bot_settings(**overrides):
    bot = {
        "WhiteBotLevel": 4,
        "BlackBotLevel": 2,
        "BotScoringType": "NumberAndPotential",
        "Optimization": "O1",
        "NoRandom": False,
    }
    bot.update(overrides)
    return {"Bot": bot}


class TestEngineConfig:
    """Tests for EngineConfig validation."""

    def test_defaults(self):
        config = EngineConfig()

        assert config.white_depth == 3
        assert config.black_depth == 3
        assert config.scoring_mode is ScoringMode.MATERIAL
        assert config.pruning is True
        assert config.seed_policy is SeedPolicy.TIME

    @pytest.mark.parametrize("depth", [0, -1, "3", 2.0, True])
    def test_invalid_depth(self, depth):
        with pytest.raises(ValueError):
            EngineConfig(white_depth=depth)

        with pytest.raises(ValueError):
            EngineConfig(black_depth=depth)

    def test_pruning_must_be_bool(self):
        with pytest.raises(ValueError):
            EngineConfig(pruning="O0")

    def test_enum_values_coerced(self):
        config = EngineConfig(scoring_mode="NumberAndPotential", seed_policy="fixed")

        assert config.scoring_mode is ScoringMode.MATERIAL_AND_POTENTIAL
        assert config.seed_policy is SeedPolicy.FIXED

    def test_enum_names_coerced(self):
        config = EngineConfig(scoring_mode="material", seed_policy="TIME")

        assert config.scoring_mode is ScoringMode.MATERIAL
        assert config.seed_policy is SeedPolicy.TIME

    def test_unknown_scoring_mode(self):
        with pytest.raises(ValueError, match="scoring_mode"):
            EngineConfig(scoring_mode="Positional")

    def test_depth_for(self):
        config = EngineConfig(white_depth=5, black_depth=2)

        assert config.depth_for(Side.WHITE) == 5
        assert config.depth_for(Side.BLACK) == 2

    def test_repr(self):
        text = repr(EngineConfig(pruning=False))

        assert "Pruning: off" in text
        assert "Number" in text


class TestFromSettings:
    """Tests for building a config from a settings mapping."""

    def test_full_settings(self):
        config = EngineConfig.from_settings(bot_settings())

        assert config.white_depth == 4
        assert config.black_depth == 2
        assert config.scoring_mode is ScoringMode.MATERIAL_AND_POTENTIAL
        assert config.pruning is True
        assert config.seed_policy is SeedPolicy.TIME

    def test_o0_disables_pruning(self):
        config = EngineConfig.from_settings(bot_settings(Optimization="O0"))

        assert config.pruning is False

    def test_no_random_fixes_seed(self):
        config = EngineConfig.from_settings(bot_settings(NoRandom=True))

        assert config.seed_policy is SeedPolicy.FIXED

    def test_missing_key(self):
        settings = bot_settings()
        del settings["Bot"]["BlackBotLevel"]

        with pytest.raises(ValueError, match="BlackBotLevel"):
            EngineConfig.from_settings(settings)

    def test_missing_section(self):
        with pytest.raises(ValueError, match="Bot"):
            EngineConfig.from_settings({})

    def test_invalid_value(self):
        with pytest.raises(ValueError):
            EngineConfig.from_settings(bot_settings(WhiteBotLevel=0))

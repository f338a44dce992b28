# loa/config.py
from dataclasses import dataclass, field
import logging
import os
import tomllib  # python >=3.11

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    depth: int = 4  # plies searched by the machine player


@dataclass
class GameConfig:
    move_limit: int = 60  # total moves (both sides) before the game is tied


@dataclass
class UIConfig:
    engine_name: str = "LOA MachinePlayer"
    engine_author: str = "LOA Engine"
    api_port: int = 8000


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    game: GameConfig = field(default_factory=GameConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        # unknown sections and keys are ignored
        for section in ("search", "game", "ui"):
            if section not in raw:
                continue
            target = getattr(cfg, section)
            for k, v in raw[section].items():
                if hasattr(target, k):
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"]).upper()
        return cfg


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("LOA_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("LOA_SEARCH_DEPTH")
if override_depth:
    try:
        CONFIG.search.depth = int(override_depth)
    except ValueError:
        logger.warning("Ignoring non-integer LOA_SEARCH_DEPTH=%r", override_depth)

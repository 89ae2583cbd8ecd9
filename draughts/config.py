"""
Central configuration for the console game.
Pydantic models for type-safe configuration management.

The rules themselves are fixed; only presentation, evaluation weights and
logging can be tuned.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from .notation import parse_square


class UISettings(BaseModel):
    """Console display settings."""

    use_color: bool = Field(default=True, description="Enable ANSI colored terminal output")
    use_unicode: bool = Field(default=False, description="Use Unicode glyphs for pieces")
    show_counts: bool = Field(default=True, description="Print the piece census above the board")
    highlight_moves: bool = Field(default=True, description="Mark the selected piece and its destinations")

    @field_validator('use_color', 'use_unicode', 'show_counts', 'highlight_moves', mode='before')
    @classmethod
    def validate_bool_fields(cls, v):
        if isinstance(v, str):
            return v.strip().lower() in ('1', 'true', 'yes', 'on')
        return bool(v)


class EvaluationSettings(BaseModel):
    """Weights of the computer's material evaluation."""

    man_weight: int = Field(default=10, ge=0, description="Score per man of material advantage")
    king_weight: int = Field(default=15, ge=0, description="Score per king of material advantage")
    centre_square: str = Field(default="E5", description="Cell whose occupation earns the centre bonus")
    centre_bonus: int = Field(default=8, ge=0, description="Bonus for an own man on the centre cell")

    @field_validator('centre_square', mode='before')
    @classmethod
    def validate_centre_square(cls, v):
        cell = parse_square(str(v))
        if cell is None:
            raise ValueError(f"centre_square must be a square between A1 and H8, got {v!r}")
        if (cell.col + cell.row) % 2 == 0:
            raise ValueError(f"centre_square must be a playable (dark) square, got {v!r}")
        return str(v).strip().upper()


class GameSettings(BaseModel):
    """Game start settings."""

    human_side: Optional[str] = Field(default=None, description="'white' or 'black'; prompt when unset")

    @field_validator('human_side', mode='before')
    @classmethod
    def validate_human_side(cls, v):
        if v is None or v == "":
            return None
        v_lower = str(v).strip().lower()
        if v_lower not in ('white', 'black'):
            raise ValueError("human_side must be 'white' or 'black'")
        return v_lower


class LoggingSettings(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_to_file: bool = Field(default=False, description="Write logs to file")
    log_file_path: str = Field(default="draughts.log", description="Log file path")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class DraughtsConfig(BaseModel):
    """Main configuration model."""

    ui: UISettings = Field(default_factory=UISettings)
    evaluation: EvaluationSettings = Field(default_factory=EvaluationSettings)
    game: GameSettings = Field(default_factory=GameSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Metadata
    version: str = Field(default="1.0.0", description="Configuration version")
    config_file: Optional[str] = Field(default=None, description="Path to config file")

    def __init__(self, **data):
        super().__init__(**data)
        # No colors when output is piped
        try:
            if not sys.stdout.isatty():
                self.ui.use_color = False
        except (AttributeError, OSError, ValueError):
            self.ui.use_color = False

    @classmethod
    def from_env(cls) -> 'DraughtsConfig':
        """Create configuration from environment variables."""
        return cls(
            ui=UISettings(
                use_color=os.getenv('DRAUGHTS_COLOR', 'true'),
                use_unicode=os.getenv('DRAUGHTS_UNICODE', 'false'),
            ),
            evaluation=EvaluationSettings(
                man_weight=int(os.getenv('DRAUGHTS_MAN_WEIGHT', '10')),
                king_weight=int(os.getenv('DRAUGHTS_KING_WEIGHT', '15')),
                centre_bonus=int(os.getenv('DRAUGHTS_CENTRE_BONUS', '8')),
            ),
            game=GameSettings(
                human_side=os.getenv('DRAUGHTS_SIDE'),
            ),
            logging=LoggingSettings(
                log_level=os.getenv('DRAUGHTS_LOG_LEVEL', 'WARNING'),
                log_to_file=os.getenv('DRAUGHTS_LOG_FILE', 'false').lower() == 'true',
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'ui': self.ui.model_dump(),
            'evaluation': self.evaluation.model_dump(),
            'game': self.game.model_dump(),
            'logging': self.logging.model_dump(),
            'version': self.version,
            'config_file': self.config_file,
        }

    def save_to_file(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        config_dict = self.to_dict()
        config_dict['config_file'] = filepath

        with open(filepath, 'w') as f:
            json.dump(config_dict, f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str) -> 'DraughtsConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls(
            ui=UISettings(**data.get('ui', {})),
            evaluation=EvaluationSettings(**data.get('evaluation', {})),
            game=GameSettings(**data.get('game', {})),
            logging=LoggingSettings(**data.get('logging', {})),
            version=data.get('version', '1.0.0'),
            config_file=filepath,
        )


# Global configuration instance
_config: Optional[DraughtsConfig] = None


def get_config() -> DraughtsConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = DraughtsConfig.from_env()
    return _config


def set_config(config: DraughtsConfig) -> DraughtsConfig:
    global _config
    _config = config
    return _config


def load_config_from_file(filepath: str) -> DraughtsConfig:
    """Load configuration from file and update global instance."""
    return set_config(DraughtsConfig.load_from_file(filepath))


def reset_config() -> None:
    """Reset the global configuration to defaults."""
    global _config
    _config = None


# Convenience functions for common configuration access
def get_ui_settings() -> UISettings:
    return get_config().ui


def get_evaluation_settings() -> EvaluationSettings:
    return get_config().evaluation


def get_logging_settings() -> LoggingSettings:
    return get_config().logging


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging once, from the logging settings unless ``level`` is given."""
    if getattr(setup_logging, "_configured", False):
        return
    settings = get_logging_settings()
    level_name = (level or settings.log_level).upper()
    kwargs: Dict[str, Any] = {
        "level": getattr(logging, level_name, logging.WARNING),
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
    }
    if settings.log_to_file:
        kwargs["filename"] = settings.log_file_path
    logging.basicConfig(**kwargs)
    setup_logging._configured = True  # type: ignore[attr-defined]

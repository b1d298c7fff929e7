"""
Refinement configuration

Heuristic thresholds used by the text-quality filter and the goal deduction stage.
Every field can be overridden with a PROTEGE_<FIELD_NAME> environment variable
(or a .env file), e.g. PROTEGE_MIN_VOWEL_RATIO=0.2
"""

import os
from typing import Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()

ENV_PREFIX = "PROTEGE_"


class ProtegeConfig(BaseModel):
    """Tunable constants for segment classification and goal deduction"""

    # Gibberish rules
    vowelless_max_length: int = Field(8, ge=1, description="Segments longer than this with no vowel are gibberish")
    repeat_run_length: int = Field(4, ge=2, description="Same character repeated this many times marks keyboard mashing")
    consonant_run_length: int = Field(5, ge=2, description="Consecutive consonants that mark a segment as gibberish")
    long_segment_length: int = Field(15, ge=1, description="Segments longer than this need a minimum vowel ratio")

    # Meaningful rules
    min_vowel_ratio: float = Field(0.15, ge=0.0, le=1.0, description="Lowest vowel/length ratio of a real word")
    max_vowel_ratio: float = Field(0.75, ge=0.0, le=1.0, description="Highest vowel/length ratio of a real word")
    min_meaningful_length: int = Field(2, ge=1, description="Shorter segments are never meaningful on their own")
    max_word_length: int = Field(20, ge=1, description="Longest lowercase word accepted as meaningful")

    # Context resolution for ambiguous segments
    context_min_length: int = Field(3, ge=1, description="Shortest ambiguous segment kept by the vowel rule")
    context_max_length: int = Field(15, ge=1, description="Longest ambiguous segment kept by the vowel rule")
    context_min_vowels: int = Field(2, ge=0, description="Vowels an ambiguous segment needs to be kept")

    # Goal deduction
    task_target_prefix: str = Field("task-", description="Target prefix identifying task-like toggle controls")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "vowelless_max_length": 8,
                "min_vowel_ratio": 0.15,
                "max_vowel_ratio": 0.75,
                "task_target_prefix": "task-"
            }
        }

    @classmethod
    def from_env(cls) -> 'ProtegeConfig':
        """
        Build configuration from PROTEGE_* environment variables

        Returns:
            ProtegeConfig with overrides applied on top of the defaults

        Raises:
            ValueError: If an override cannot be converted to the field's type
        """
        overrides = {}
        for field_name in cls.model_fields:
            env_value = os.getenv(f"{ENV_PREFIX}{field_name.upper()}")
            if env_value is not None and env_value.strip():
                overrides[field_name] = env_value.strip()

        return cls(**overrides)


# Default configuration instance
_default_config: Optional[ProtegeConfig] = None


def get_config() -> ProtegeConfig:
    """Get or create the default configuration"""
    global _default_config
    if _default_config is None:
        _default_config = ProtegeConfig.from_env()
    return _default_config


def reset_config() -> None:
    """Drop the cached default so the environment is read again on next use"""
    global _default_config
    _default_config = None

"""Configuration management for the Dreamworld Image Generator.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the DREAMWORLD_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (DREAMWORLD_* prefix)
2. .env file in the project root
3. Default values defined in DreamworldConfig

Example .env file:
    DREAMWORLD_OPENAI_API_KEY=sk-...
    DREAMWORLD_REPLICATE_API_TOKEN=r8_...
    DREAMWORLD_TEXT_MODEL=gpt-4
    DREAMWORLD_SERVER_PORT=7860

Credentials
-----------
Both provider credentials are optional here.  When they are left unset the
provider SDKs fall back to their own environment variables
(``OPENAI_API_KEY`` and ``REPLICATE_API_TOKEN``), so an existing shell setup
keeps working unchanged.

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
This ensures a single source of truth for all configuration values across
the application.

Usage Example
-------------
    from dreamworld.core.config import config

    print(config.text_model)
    print(config.default_aspect_ratio)
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Package-relative asset directories.  Resolved from this file so the app works
# the same from a source checkout and from an installed wheel.
_PACKAGE_DIR = Path(__file__).resolve().parent.parent

AspectRatio = Literal["1:1", "16:9", "21:9", "3:2", "2:3", "4:5", "5:4", "3:4", "4:3", "9:16", "9:21"]


class DreamworldConfig(BaseSettings):
    """Main configuration for the Dreamworld Image Generator.

    Attributes
    ----------
    Provider Settings:
        text_provider : str
            Registered name of the text-generation provider
        image_provider : str
            Registered name of the image-generation provider
        openai_api_key : str | None
            OpenAI API key (falls back to OPENAI_API_KEY)
        replicate_api_token : str | None
            Replicate API token (falls back to REPLICATE_API_TOKEN)

    Text Generation:
        text_model : str
            Chat completion model used to expand prompts
        max_tokens : int
            Upper bound on the generated description length

    Image Generation:
        image_model : str
            Replicate model version reference
        hf_lora : str
            LoRA adapter identifier passed to the image model
        default_output_quality : int
            Output quality used when a request omits it (0-100)
        default_num_inference_steps : int
            Inference steps used when a request omits it (1-50)
        default_aspect_ratio : AspectRatio
            Aspect ratio used when a request omits it

    Server:
        server_host : str
            Bind address for uvicorn
        server_port : int
            Port for uvicorn (1024-65535)
        log_level : str
            Root logging level
        static_dir : Path
            Directory served under /static
        templates_dir : Path
            Directory containing index.html
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DREAMWORLD_",
        case_sensitive=False,
        extra="ignore",
    )

    # Provider selection
    text_provider: str = Field(
        default="openai",
        description="Registered text-generation provider name",
    )
    image_provider: str = Field(
        default="replicate",
        description="Registered image-generation provider name",
    )

    # Credentials
    openai_api_key: str | None = Field(
        default=None,
        description="OpenAI API key (SDK reads OPENAI_API_KEY when unset)",
    )
    replicate_api_token: str | None = Field(
        default=None,
        description="Replicate API token (SDK reads REPLICATE_API_TOKEN when unset)",
    )

    # Text generation
    text_model: str = Field(
        default="gpt-4",
        description="Chat completion model used to expand prompts",
    )
    max_tokens: int = Field(
        default=150,
        description="Maximum tokens in the generated description",
        ge=1,
        le=4096,
    )

    # Image generation
    image_model: str = Field(
        default=(
            "lucataco/flux-dev-lora:"
            "613a21a57e8545532d2f4016a7c3cfa3c7c63fded03001c2e69183d557a929db"
        ),
        description="Replicate model version used for rendering",
    )
    hf_lora: str = Field(
        default="pajke/pudgy2",
        description="LoRA adapter applied by the image model",
    )
    default_output_quality: int = Field(default=50, ge=0, le=100)
    default_num_inference_steps: int = Field(default=20, ge=1, le=50)
    default_aspect_ratio: AspectRatio = Field(default="16:9")

    # Server
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    # Paths
    static_dir: Path = Field(
        default=_PACKAGE_DIR / "static",
        description="Directory of static frontend assets",
    )
    templates_dir: Path = Field(
        default=_PACKAGE_DIR / "templates",
        description="Directory containing index.html",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value):
        """Accept log levels in any case (e.g. ``info`` from a .env file)."""
        return value.upper() if isinstance(value, str) else value


# Global configuration instance
config = DreamworldConfig()

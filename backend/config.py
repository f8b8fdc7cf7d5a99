import os
import logging
from typing import Dict, Optional, Any

logger = logging.getLogger(__name__)

try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError:
    pass

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8001
DEFAULT_PROVIDER = "deepgram"
DEFAULT_DEEPGRAM_URL = "https://api.deepgram.com/v1/listen"
DEFAULT_DEEPGRAM_MODEL = "nova-2"
DEFAULT_LANGUAGE = "en"
DEFAULT_AUDIO_TYPE = "audio/webm"
DEFAULT_PROVIDER_TIMEOUT = 120.0


class Config:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self.host = os.environ.get("HOST", DEFAULT_HOST)
        self.port = int(os.environ.get("PORT", DEFAULT_PORT))
        self.debug = os.environ.get("DEBUG", "0") == "1"
        self.provider = os.environ.get("PROVIDER", DEFAULT_PROVIDER).lower()
        self.deepgram_api_key = os.environ.get("DEEPGRAM_API_KEY") or None
        self.deepgram_url = os.environ.get("DEEPGRAM_URL", DEFAULT_DEEPGRAM_URL)
        self.deepgram_model = os.environ.get("DEEPGRAM_MODEL", DEFAULT_DEEPGRAM_MODEL)
        self.default_language = os.environ.get("DEFAULT_LANGUAGE", DEFAULT_LANGUAGE)
        self.default_audio_type = os.environ.get("DEFAULT_AUDIO_TYPE", DEFAULT_AUDIO_TYPE)
        self.provider_timeout = float(os.environ.get("PROVIDER_TIMEOUT", DEFAULT_PROVIDER_TIMEOUT))

    def get_api_key(self) -> Optional[str]:
        return self.deepgram_api_key

    def as_dict(self) -> Dict[str, Any]:
        return {
            "host": self.host,
            "port": self.port,
            "debug": self.debug,
            "provider": self.provider,
            "deepgram_url": self.deepgram_url,
            "deepgram_model": self.deepgram_model,
            "default_language": self.default_language,
            "default_audio_type": self.default_audio_type,
            "provider_timeout": self.provider_timeout,
            "has_api_key": self.deepgram_api_key is not None,
        }


config = Config()


def get_config() -> Config:
    return config


def create_transcription_adapter(cfg: Config):
    """Create the transcription provider adapter based on PROVIDER env var.

    Uses lazy imports so unused provider clients are never loaded.
    """
    provider = cfg.provider

    if provider == "deepgram":
        from adapters.deepgram import DeepgramTranscriptionAdapter
        transcription = DeepgramTranscriptionAdapter(
            api_key=cfg.deepgram_api_key,
            api_url=cfg.deepgram_url,
            model=cfg.deepgram_model,
            timeout=cfg.provider_timeout,
        )
    else:
        raise ValueError(f"Unknown PROVIDER: {provider!r}. Valid options: deepgram")

    logger.info(f"Transcription adapter: provider={provider}, model={transcription.model_name()}")
    return transcription


def create_progress_adapter():
    """Create the progress reporting adapter (always logging)."""
    from adapters.local.log_progress import LogProgressAdapter
    return LogProgressAdapter()

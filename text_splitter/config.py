import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .models import SplitterConfig

ENV_PREFIX = "TEXT_SPLITTER_"


@dataclass
class SplitterServiceConfig:
    data_dir: str = "data/splitter"
    splitter: SplitterConfig = field(default_factory=SplitterConfig)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SplitterServiceConfig":
        """
        Build a config from TEXT_SPLITTER_* environment variables.

        Recognized: DATA_DIR, MAX_TOKENS, ANNOTATOR, ENCODING and
        KEEP_TRAILING_SPACE. Unset variables keep their defaults; values are
        validated by SplitterConfig.
        """
        environ = os.environ if environ is None else environ
        settings = {}
        for key, name in (
            ("max_tokens", "MAX_TOKENS"),
            ("annotator", "ANNOTATOR"),
            ("encoding_name", "ENCODING"),
            ("keep_trailing_space", "KEEP_TRAILING_SPACE"),
        ):
            value = environ.get(ENV_PREFIX + name)
            if value:
                settings[key] = value
        return cls(
            data_dir=environ.get(ENV_PREFIX + "DATA_DIR") or cls.data_dir,
            splitter=SplitterConfig(**settings),
        )

"""Central configuration defaults for reed_muller."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CodecConfig:
    m: int = 3
    error_probability: float = 0.01
    experiments: int = 1000
    m_lo: int = 2
    m_hi: int = 7
    seed: int = 0


DEFAULTS = CodecConfig()


def get_config() -> CodecConfig:
    """Return a copy of the default configuration."""

    return CodecConfig(**DEFAULTS.__dict__)

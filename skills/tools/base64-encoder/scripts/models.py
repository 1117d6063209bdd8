#!/usr/bin/env python3
"""
Base64 Encoder/Decoder - Data Models
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Mode(Enum):
    """Direction of the conversion."""
    DECODE = "decode"
    ENCODE = "encode"


class Alphabet(Enum):
    """Base-64 alphabets, identified by their two non-alphanumeric symbols."""
    STANDARD = "+/"
    URL_SAFE = "-_"

    @property
    def altchars(self) -> bytes:
        return self.value.encode("ascii")


@dataclass
class CodecConfig:
    """Settings for one run of the tool."""
    mode: Mode = Mode.DECODE              # decode unless -e is given
    alphabet: Alphabet = Alphabet.STANDARD
    output: Optional[str] = None          # None writes to stdout
    log_level: str = "WARNING"

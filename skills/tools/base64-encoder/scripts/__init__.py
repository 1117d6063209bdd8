# b64
# Base-64 encode/decode command-line tool

from .exceptions import (
    Base64ToolError,
    InputReadError,
    DecodeError,
    OutputWriteError,
    ConfigurationError,
)

from .models import Mode, Alphabet, CodecConfig

from .line_prefixer import (
    PrefixReader,
    PrefixWriter,
    prefix_lines,
    iter_prefixed,
    prefix_text,
)
from .codec import clean_input, encode_data, decode_data
from .logger import get_logger, setup_logging
from .base64_encoder import (
    __version__,
    create_argument_parser,
    create_config_from_args,
    read_input,
    main,
)

__all__ = [
    # Exceptions
    'Base64ToolError',
    'InputReadError',
    'DecodeError',
    'OutputWriteError',
    'ConfigurationError',
    # Models
    'Mode',
    'Alphabet',
    'CodecConfig',
    # Line prefixer
    'PrefixReader',
    'PrefixWriter',
    'prefix_lines',
    'iter_prefixed',
    'prefix_text',
    # Codec
    'clean_input',
    'encode_data',
    'decode_data',
    # Logger
    'get_logger',
    'setup_logging',
    # Main
    '__version__',
    'create_argument_parser',
    'create_config_from_args',
    'read_input',
    'main',
]

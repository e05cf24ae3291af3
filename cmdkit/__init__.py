"""
Cmdkit CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .arguments import Arguments
from .command import Command
from .manager import DispatchState, Manager
from .option import Option
from .option_types import OptionMode, ValueType
from .version import __version__

logger = logging.getLogger("cmdkit")


__all__ = [
    "Arguments",
    "Command",
    "DispatchState",
    "Manager",
    "Option",
    "OptionMode",
    "ValueType",
    "__version__",
]

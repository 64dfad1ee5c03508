# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""cor_args - Chain of Responsibility value resolution.

Resolves a single named configuration value by asking an ordered chain of
sources (command-line arguments, environment variables, raw files, JSON/TOML
documents, loaded configuration, a constant default) until one answers.
"""

from __future__ import annotations

from cor_args._internal.logging_utils import LogConfig, configure_logging
from cor_args.chain import build_chain, describe_chain, iter_chain
from cor_args.exceptions import (
    CorArgsError,
    CorArgsTypeError,
    CorArgsValidationError,
    HandlerLinkError,
    UnresolvedKeyError,
)
from cor_args.handlers import (
    ArgHandler,
    ArgumentSource,
    ConfigHandler,
    DefaultHandler,
    EnvHandler,
    FileHandler,
    Handler,
    JSONFileHandler,
    StructuredFileHandler,
    TOMLFileHandler,
)

__all__ = [
    "ArgHandler",
    "ArgumentSource",
    "ConfigHandler",
    "CorArgsError",
    "CorArgsTypeError",
    "CorArgsValidationError",
    "DefaultHandler",
    "EnvHandler",
    "FileHandler",
    "Handler",
    "HandlerLinkError",
    "JSONFileHandler",
    "LogConfig",
    "StructuredFileHandler",
    "TOMLFileHandler",
    "UnresolvedKeyError",
    "__version__",
    "build_chain",
    "configure_logging",
    "describe_chain",
    "iter_chain",
]

__version__ = "0.2.0"

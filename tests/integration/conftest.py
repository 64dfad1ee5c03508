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

"""Fixtures for multi-handler integration tests."""

from __future__ import annotations

import argparse

import pytest


@pytest.fixture
def app_parser() -> argparse.ArgumentParser:
    """Provide the host application's parser, as a CLI built on cor_args would.

    Returns:
        Parser declaring ``--config``, ``--some_key`` and ``--example`` options.
    """
    parser = argparse.ArgumentParser(prog="myapp")
    _ = parser.add_argument("--config")
    _ = parser.add_argument("--some_key")
    _ = parser.add_argument("--example")
    return parser

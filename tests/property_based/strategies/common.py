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

"""Reusable Hypothesis strategies for cor_args inputs."""

from __future__ import annotations

import hypothesis.strategies as st

_NAME_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_"


def env_names(min_size: int = 0, max_size: int = 12) -> st.SearchStrategy[str]:
    """Return a strategy yielding portable environment variable name fragments."""
    return st.text(alphabet=_NAME_ALPHABET, min_size=min_size, max_size=max_size)


def lookup_keys(max_size: int = 20) -> st.SearchStrategy[str]:
    """Return a strategy yielding arbitrary lookup keys."""
    return st.text(max_size=max_size)


def text_values(max_size: int = 30) -> st.SearchStrategy[str]:
    """Return a strategy yielding arbitrary resolved values."""
    return st.text(max_size=max_size)


def handler_stacks(max_size: int = 5) -> st.SearchStrategy[list[dict[str, str]]]:
    """Return a strategy yielding per-handler key/value tables for a chain.

    Returns:
        Lists of mappings, one per link, each standing in for that link's source.
    """
    table = st.dictionaries(keys=env_names(min_size=1, max_size=3), values=text_values(), max_size=4)
    return st.lists(table, max_size=max_size)

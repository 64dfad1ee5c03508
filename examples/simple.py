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

"""Resolve ``verbosity`` from the environment, a file, or a default.

Try each source in turn::

    verbosity=info python examples/simple.py       # EnvHandler
    echo debug > verbosity.txt && python examples/simple.py   # FileHandler
    python examples/simple.py                       # DefaultHandler

Set ``COR_ARGS_LOG_LEVEL=debug`` to see which sources were consulted.
"""

from __future__ import annotations

from pathlib import Path

from cor_args import DefaultHandler, EnvHandler, FileHandler, configure_logging


def main() -> None:
    _ = configure_logging()
    handler = EnvHandler().next(
        FileHandler(Path.cwd() / "verbosity.txt").next(DefaultHandler("trace")),
    )
    # The chain ends with a DefaultHandler, so a value is always found.
    verbosity = handler.require("verbosity")
    print(f"verbosity = {verbosity}")


if __name__ == "__main__":
    main()

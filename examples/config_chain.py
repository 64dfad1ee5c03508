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

"""Resolve ``verbosity`` from a TOML config, then env, file, default.

Create ``default.toml`` in the current directory::

    verbosity = "warn"

then::

    python examples/config_chain.py                  # ConfigHandler
    verbosity=info python examples/config_chain.py   # EnvHandler (no default.toml)
    python examples/config_chain.py                  # DefaultHandler
"""

from __future__ import annotations

from pathlib import Path

from cor_args import ConfigHandler, DefaultHandler, EnvHandler, FileHandler, configure_logging
from cor_args.compat import tomllib


def _load_config(path: Path) -> dict[str, object]:
    if not path.is_file():
        return {}
    with path.open("rb") as handle:
        return tomllib.load(handle)


def main() -> None:
    _ = configure_logging()
    config = _load_config(Path.cwd() / "default.toml")
    handler = ConfigHandler(config, search_nested=True).next(
        EnvHandler().next(
            FileHandler(Path.cwd() / "verbosity.txt").next(DefaultHandler("trace")),
        ),
    )
    print(f"verbosity = {handler.require('verbosity')}")


if __name__ == "__main__":
    main()

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

"""Resolve ``verbosity`` from the command line first, then env, file, default.

::

    python examples/argparse_chain.py --verbosity debug   # ArgHandler
    verbosity=info python examples/argparse_chain.py      # EnvHandler
    echo debug > verbosity.txt && python examples/argparse_chain.py
    python examples/argparse_chain.py                     # DefaultHandler
"""

from __future__ import annotations

import argparse
from pathlib import Path

from cor_args import ArgHandler, DefaultHandler, EnvHandler, FileHandler, build_chain, configure_logging


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="argparse_chain")
    _ = parser.add_argument("--verbosity")
    _ = parser.add_argument("--log-level", choices=("debug", "info", "warning", "error"))
    args = parser.parse_args(argv)
    _ = configure_logging(log_level=args.log_level)

    handler = build_chain(
        ArgHandler(args),
        EnvHandler(),
        FileHandler(Path.cwd() / "verbosity.txt"),
        DefaultHandler("trace"),
    )
    print(f"verbosity = {handler.require('verbosity')}")


if __name__ == "__main__":
    main()

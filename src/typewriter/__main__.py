# SPDX-FileCopyrightText: 2024 Benedict Harcourt <ben.harcourt@harcourtprogramming.co.uk>
#
# SPDX-License-Identifier: BSD-2-Clause

from __future__ import annotations as _future_annotations

from collections.abc import Sequence

import argparse
import os
import pathlib

from dotenv import load_dotenv

from typewriter import bench, logger, stubs


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="typewriter")
    parser.add_argument("--log-level", default=os.environ.get("TYPEWRITER_LOG_LEVEL", "INFO"))
    parser.add_argument("--local", action="store_true", default=False)

    commands = parser.add_subparsers(dest="command", required=True)

    stub_parser = commands.add_parser("stubs", help="write .pyi stubs for the generated methods")
    stub_parser.add_argument(
        "--output",
        type=pathlib.Path,
        default=pathlib.Path(os.environ.get("TYPEWRITER_STUB_PATH", "typings/typewriter")),
    )

    bench_parser = commands.add_parser("bench", help="time rendering of a sample page")
    bench_parser.add_argument(
        "--iterations",
        type=int,
        default=int(os.environ.get("TYPEWRITER_BENCH_ITERATIONS", "10000")),
    )

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()

    args = parse_args(argv)
    log = logger.configure(args.log_level.upper(), indent=2 if args.local else None).getChild("cli")

    match args.command:
        case "stubs":
            written = stubs.write_stubs(args.output)
            log.info("Generated %d stub files", len(written))
        case "bench":
            bench.run(args.iterations)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

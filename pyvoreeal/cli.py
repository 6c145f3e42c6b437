#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
import sys
import argparse
import logging
import importlib.util

import coloredlogs

# Import PyVoreeal core modules
import pyvoreeal
from pyvoreeal.src.Region import Region
from pyvoreeal.src.RegionArchive import loadRegions, saveRegions


"""
- setup_logging
- setup_environment
- run_script
- start_interactive
- classify / contains / pack / dump
- main

"""

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVEL_ENV = "PYVOREEAL_LOG_LEVEL"
LOG_FORMAT = "[%(asctime)s] - [%(name)s] - [%(levelname)s] - [%(message)s]"

logger = logging.getLogger("PyVoreeal.CLI")


def default_log_level():
    """Log level from the environment, INFO if unset or unknown."""
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    if level not in LOG_LEVELS:
        return "INFO"
    return level


def setup_logging(log_level):
    """Set up logging system"""
    root_logger = logging.getLogger()

    # Clear handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    # coloredlogs attaches its own console handler to the root logger
    coloredlogs.install(level=log_level, logger=root_logger, fmt=LOG_FORMAT)

    # Set 3rd-party logging level to root
    logging.getLogger("numpy").setLevel(logging.WARNING)

    return root_logger


def setup_environment():
    """Set up PyVoreeal environment."""
    env = {
        "logger": logger,
        "version": pyvoreeal.version(),
        "Region": pyvoreeal.Region,
        "ContainmentType": pyvoreeal.ContainmentType,
        "VoxelRegion": pyvoreeal.VoxelRegion,
        "RegionArchive": pyvoreeal.RegionArchive,
        "loadRegions": pyvoreeal.loadRegions,
        "saveRegions": pyvoreeal.saveRegions,
    }
    logger.debug(f"Initialized PyVoreeal {env['version']} environment")
    return env


def run_script(script_path, env):
    """Run the specified Python script."""
    logger.info(f"Executing script: {script_path}")

    spec = importlib.util.spec_from_file_location("pyvoreeal_script", script_path)
    if spec is None:
        raise FileNotFoundError(f"Could not load script: {script_path}")
    module = importlib.util.module_from_spec(spec)

    # Inject PyVoreeal environment into module
    module.PYVOREEAL_ENV = env

    spec.loader.exec_module(module)
    logger.info(f"Script execution completed: {script_path}")
    return module


def start_interactive(env):
    """Start interactive IPython environment."""
    from IPython import embed

    logger.info("Starting interactive PyVoreeal environment")

    banner = """
    =====================================================
    PyVoreeal Interactive Environment
    -----------------------------------------------------
    Region, ContainmentType, VoxelRegion, RegionArchive,
    loadRegions and saveRegions are available.

    Example:
    - a = Region(0, 0, 0, 10, 10, 10)
    - Region.contains(a, Region(2, 2, 2, 3, 3, 3))
    =====================================================
    """

    namespace = {"PYVOREEAL_ENV": env}
    namespace.update({k: v for k, v in env.items() if k != "logger"})

    embed(banner1=banner, user_ns=namespace)


def classify(args):
    region1 = Region(*args.region1)
    region2 = Region(*args.region2)
    result = Region.contains(region1, region2)
    print(f"{region1} vs {region2}: {result.name}")
    print(f"intersect: {Region.intersect(region1, region2)}")
    return 0


def contains(args):
    region = Region(*args.region)
    inside = Region.contains(region, args.point)
    print(f"{region} contains {list(args.point)}: {inside}")
    return 0


def pack(args):
    values = args.values
    if len(values) % 6 != 0:
        logger.error(f"Expected groups of 6 integers, got {len(values)} values")
        return 1
    regions = [Region(*values[i : i + 6]) for i in range(0, len(values), 6)]
    saveRegions(args.file, regions)
    logger.info(f"Wrote {len(regions)} regions to {args.file}")
    return 0


def dump(args):
    for index, region in enumerate(loadRegions(args.file)):
        print(f"{index}: {region}")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        description="PyVoreeal - integer regions for voxel volumes"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=default_log_level(),
        help="Set log level",
    )
    subparsers = parser.add_subparsers(dest="command")

    p = subparsers.add_parser("classify", help="Classify one region against another")
    p.add_argument("region1", type=int, nargs=6, metavar="N", help="X Y Z W H D")
    p.add_argument("region2", type=int, nargs=6, metavar="N", help="X Y Z W H D")
    p.set_defaults(func=classify)

    p = subparsers.add_parser("contains", help="Check if a region contains a point")
    p.add_argument("region", type=int, nargs=6, metavar="N", help="X Y Z W H D")
    p.add_argument("point", type=float, nargs=3, metavar="P", help="PX PY PZ")
    p.set_defaults(func=contains)

    p = subparsers.add_parser("pack", help="Write regions to an archive file")
    p.add_argument("file", help="Output file")
    p.add_argument("values", type=int, nargs="+", help="X Y Z W H D, repeated")
    p.set_defaults(func=pack)

    p = subparsers.add_parser("dump", help="Print regions stored in an archive file")
    p.add_argument("file", help="Archive file")
    p.set_defaults(func=dump)

    p = subparsers.add_parser("run", help="Execute a Python script")
    p.add_argument("script", help="Python script to execute")

    subparsers.add_parser("shell", help="Start an IPython shell")

    return parser


def main(argv=None):
    """Main function, handle command line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        if args.command == "run":
            run_script(args.script, setup_environment())
            return 0
        if args.command in (None, "shell"):
            start_interactive(setup_environment())
            return 0
        return args.func(args)
    except (OSError, ValueError, EOFError, OverflowError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

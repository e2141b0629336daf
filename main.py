import argparse
import logging
import sys
import os
from dataclasses import asdict

import yaml

from csvframe.config import RunConfig, load_config, validate_config
from csvframe.exceptions import ConfigValidationError, LoadError
from csvframe.loader import load
from csvframe.report import render_report

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Load a delimited numeric file and print a summary of it')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--config', type=str, help='Path to YAML config file')
    source.add_argument('--source', type=str, help='Path to the delimited text file')
    parser.add_argument('--delimiter', type=str, help='Field delimiter (default ",")')
    parser.add_argument('--detailed', action='store_true', help='Also compute per-column min/max')
    parser.add_argument('--seed', type=int, help='Seed for the random sample')
    return parser.parse_args(argv)


def build_config(args) -> RunConfig:
    if args.config is not None:
        if not os.path.exists(args.config):
            raise ConfigValidationError(f"Config file {args.config} does not exist.")
        config = load_config(args.config)
    else:
        config = RunConfig.from_dict({'source': args.source})
    if args.delimiter is not None:
        config.delimiter = args.delimiter
    if args.detailed:
        config.detailed = True
    if args.seed is not None:
        config.seed = args.seed
    validate_config(asdict(config))
    return config


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        config = build_config(args)
    except (ConfigValidationError, yaml.YAMLError, OSError) as e:
        print(f"Config validation error: {e}")
        return 1

    logging.basicConfig(level=config.logging_level, format='%(asctime)s - %(levelname)s - %(message)s')
    logger.info(f"Loading {config.source} (delimiter={config.delimiter!r}, detailed={config.detailed})")
    try:
        frame = load(config.source, config.delimiter, config.detailed,
                     max_rows=config.max_rows, max_columns=config.max_columns, encoding=config.encoding)
    except LoadError as e:
        print(f"Failed to load {config.source}: {e}")
        return 1

    print(render_report(frame, config.head_rows, config.sample_rows, seed=config.seed))
    return 0


if __name__ == '__main__':
    sys.exit(main())

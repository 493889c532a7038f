#!/usr/bin/env python3
# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "pydantic==2.8.2",
#     "requests==2.32.3",
# ]
# ///
"""! @brief Sealed league pool analysis that utilizes Scryfall and 17Lands data"""

import argparse
import sys
from poolparser.configuration import read_configuration
from poolparser.exceptions import PoolParserError
from poolparser.logger import create_logger
from poolparser.pipeline import run

logger = create_logger()


def main(argv=None):
    parser = argparse.ArgumentParser()

    parser.add_argument("-c", "--config")
    parser.add_argument("-r", "--roster")
    parser.add_argument("--refresh", action="store_true")
    parser.add_argument("--dump-performance", action="store_true")

    args = parser.parse_args(argv)

    configuration, _ = read_configuration(args.config)
    if args.roster:
        configuration.settings.roster_file = args.roster

    try:
        reports = run(configuration, args.refresh, args.dump_performance)
    except (PoolParserError, OSError) as error:
        logger.error(error)
        return 1

    for report in reports:
        logger.info(f"Report: {report}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

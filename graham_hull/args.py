import argparse

from graham_hull import constants, data


def parse_args(argv=None):
    parser = argparse.ArgumentParser("graham-hull")
    parser.add_argument(
        "--points", type=data.parse_point, nargs="*", default=None,
        help="points as X,Y pairs; quote a pair starting with a minus "
             "sign with a leading space, e.g. ' -1,2'")
    parser.add_argument("--log-level", type=str.upper,
                        default=constants.DEFAULT_LOG_LEVEL,
                        choices=constants.LOG_LEVELS)
    parsed, _ = parser.parse_known_args(argv)
    return parsed

"""Command-line entry point: classify shares from a JSON document."""

import argparse
import logging
import sys

from sharevote.config import ClassifierConfig
from sharevote.consensus import classify
from sharevote.decode import load
from sharevote.errors import DecodeError, InsufficientShares, ShareVoteError
from sharevote.report import ConsensusReport

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sharevote',
        description='Recover a threshold secret by majority vote over all '
                    'k-subsets of the shares and flag inconsistent shares.',
    )
    parser.add_argument('input', nargs='?', default='-',
                        help='Share document (JSON); "-" reads stdin')
    parser.add_argument('--json', action='store_true',
                        help='Print the report as JSON')
    parser.add_argument('--workers', type=int, default=None,
                        help='Worker processes for tallying (default 1)')
    parser.add_argument('--chunk-size', type=int, default=None,
                        help='Combinations per worker task')
    parser.add_argument('--permissive', action='store_true',
                        help='Skip combinations with a repeated x instead of failing')
    parser.add_argument('--log-level', default=None,
                        help='DEBUG, INFO, WARNING, ERROR')
    return parser


def run(args, stdin=None, stdout=None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    config = ClassifierConfig.from_env().replace(
        workers=args.workers,
        chunk_size=args.chunk_size,
        strict=False if args.permissive else None,
        log_level=args.log_level,
    )
    logging.basicConfig(level=config.log_level,
                        format='%(levelname)s %(name)s: %(message)s')

    if args.input == '-':
        doc = load(stdin)
    else:
        with open(args.input) as f:
            doc = load(f)

    result = classify(doc.shares, doc.k, config)
    report = ConsensusReport(declared_n=doc.n, k=doc.k,
                             shares=doc.shares, result=result)
    print(report.to_json() if args.json else report.to_text(), file=stdout)
    return EXIT_OK


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return run(args)
    except InsufficientShares as e:
        logger.debug("Insufficient shares: n=%d k=%d", e.n_provided, e.k)
        print("No combinations to evaluate.")
        return EXIT_FAILED
    except (DecodeError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except ShareVoteError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILED
    except ValueError as e:
        # Bad configuration values
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == '__main__':
    sys.exit(main())

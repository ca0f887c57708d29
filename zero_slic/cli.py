# Module: cli.py
"""Command-line front end: reads an image from stdin, prints its superpixel labels.

Usage: zero-slic NO_CLUSTERS < image.txt

The input stream holds ``width height`` followed by ``width * height``
row-major intensities. Argument errors print a message and usage text and
still exit with status 0.
"""
import enum
import logging
import os
import re
import sys

from .io import read_text_image, write_labels
from .segmentation import segment

logger = logging.getLogger(__name__)

# Leading optionally signed integer; trailing text is ignored
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_INT_MAX = 2 ** 31 - 1


class ErrorKind(enum.Enum):
    WRONG_ARGUMENT_COUNT = "Wrong number of arguments."
    NON_POSITIVE_CLUSTER_COUNT = "Number of clusters should be positive integer."
    # Reserved, never reported
    SEGMENTATION_FAILURE = "Segmentation failed."


def check_input(args):
    """Validate the arguments following the program name.

    The count is read from the leading digits, so ``"3abc"`` and ``"3.7"``
    both give 3. Counts beyond a 32-bit int are rejected.
    Returns ``(n_clusters, None)`` on success or ``(None, ErrorKind)``.
    """
    if len(args) != 1:
        return None, ErrorKind.WRONG_ARGUMENT_COUNT
    match = _LEADING_INT.match(args[0])
    if match is None:
        return None, ErrorKind.NON_POSITIVE_CLUSTER_COUNT
    n_clusters = int(match.group(1))
    if n_clusters < 1 or n_clusters > _INT_MAX:
        return None, ErrorKind.NON_POSITIVE_CLUSTER_COUNT
    return n_clusters, None


def _configure_logging():
    level = os.environ.get("ZERO_SLIC_LOG_LEVEL", "WARNING")
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def main(argv=None, stdin=None, stdout=None):
    argv = sys.argv if argv is None else argv
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    _configure_logging()

    prog = os.path.basename(argv[0]) if argv else "zero-slic"
    n_clusters, error = check_input(argv[1:])
    if error is not None:
        logger.debug("Rejected arguments %r: %s", argv[1:], error.name)
        stdout.write(f"{error.value}\nUsage: {prog} NO_CLUSTERS\n")
        return 0

    image, width, height = read_text_image(stdin)
    labels = segment(image, width, height, n_clusters)
    write_labels(labels, width, height, stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())

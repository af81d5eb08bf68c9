import logging
import sys

from .errors import PatternError
from .pipeline import build

logger = logging.getLogger("patterndb")


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    try:
        build()
    except PatternError as exc:
        logger.error(exc.message)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

import logging
import sys
from os import environ

from showdown.errors import InvalidFormat
from showdown.evaluator import pick_winners
from showdown.evaluator import rank_hands

LOG_LEVEL = environ.get("SHOWDOWN_LOG_LEVEL", "WARNING")
SUIT_SYMBOLS = environ.get("SHOWDOWN_SUIT_SYMBOLS", "1") != "0"

USAGE = 'usage: showdown HAND [HAND ...]\n\n  e.g. showdown "4S 5S 7H 8D JC" "2S 4C 7S 9H 10H"'

logger = logging.getLogger(__name__)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    logging.basicConfig(level=LOG_LEVEL)

    if not argv:
        print(USAGE, file=sys.stderr)
        return 2

    try:
        winners = pick_winners(rank_hands(argv))
    except InvalidFormat as e:
        print(f"showdown: {' '.join(map(str, e.args))}", file=sys.stderr)
        return 2

    for hand in winners:
        print(hand.describe(pretty=SUIT_SYMBOLS))

    return 0


if __name__ == '__main__':
    sys.exit(main())

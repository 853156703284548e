import logging
import os
import sys

from avltree import AVLTree, KeyNotFoundError, natural_order

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger()

SCENARIO_KEYS = [2, 1, 6, 5, 4, 3, 15, 12, 9, 7, 11, 10, 13, 14, 16, 17, 18]


def main() -> int:
    count = int(os.environ.get("DEMO_KEY_COUNT", "20000"))
    search_key = int(os.environ.get("DEMO_SEARCH_KEY", "200001"))

    tree = AVLTree(natural_order)
    for i in range(count):
        tree.insert(i, str(i))
    logger.info(f"Built {tree}")

    try:
        value = tree.search(search_key)
    except KeyNotFoundError as e:
        logger.error(f"Search failed: {e}")
        return 1

    logger.info(f"Found {search_key} -> {value!r}")
    return 0


def run_scenario() -> AVLTree:
    """Insert the scenario keys, then delete 12."""
    tree = AVLTree(natural_order)
    for key in SCENARIO_KEYS:
        tree.insert(key, key)
    logger.info(f"Built {tree}")

    tree.delete(12)
    logger.info(f"After deleting 12: {tree}")
    return tree


if __name__ == "__main__":
    sys.exit(main())

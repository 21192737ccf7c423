import argparse
import logging
import signal
import time

from .collectors.collector_manager import CollectorManager
from .reporter import Reporter

logger = logging.getLogger(__name__)

POLL_INTERVAL_SEC = 5


def main(argv=None):
    # --- 1. Argument Parsing ---
    parser = argparse.ArgumentParser(description="Print cgroup CPU and memory usage every few seconds")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log missing or unparsable cgroup files")
    parser.add_argument("--once", action="store_true",
                        help="Print a single snapshot and exit")
    args = parser.parse_args(argv)

    # --- 2. Logging Config ---
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # --- 3. Initialization ---
    collector = CollectorManager()
    reporter = Reporter()
    reporter.print_header(collector.version)

    # --- 4. Signal Handling ---
    running = True

    def signal_handler(sig, frame):
        nonlocal running
        logger.info("Signal %s received. Stopping monitor...", sig)
        running = False

    if not args.once:
        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

    # --- 5. Monitoring Loop ---
    try:
        while running:
            loop_start = time.time()

            reporter.print_snapshot(collector.collect_metrics())

            if args.once:
                break

            elapsed_sec = time.time() - loop_start
            sleep_sec = POLL_INTERVAL_SEC - elapsed_sec
            if sleep_sec > 0 and running:
                time.sleep(sleep_sec)

    except Exception as e:
        logger.error("Unexpected error in monitoring loop: %s", e, exc_info=True)

    finally:
        if not args.once:
            logger.info("Shutting down...")


if __name__ == "__main__":
    main()

import sys

from inventory_tracker.app import main

if __name__ == "__main__":
    sys.exit(main())

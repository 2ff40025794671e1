import sys

from .update_collection import main

if __name__ == "__main__":
    sys.exit(main())

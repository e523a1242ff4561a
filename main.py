import sys

from src.dheap.cli import main


if __name__ == "__main__":
    sys.exit(main())

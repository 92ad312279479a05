import sys

from switch_table.cli import main


if __name__ == "__main__":
    sys.exit(main())

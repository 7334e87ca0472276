"""Entry point for running fakeusers as a module.

Generation is split into three commands:
  python -m fakeusers.cli.generate  -- Print one page of records
  python -m fakeusers.cli.export    -- Export a page range to CSV
  python -m fakeusers.api           -- Serve the HTTP API
"""

import sys


def main():
    print(__doc__.strip())
    sys.exit(1)


if __name__ == "__main__":
    main()

# main.py
import sys
from pathlib import Path

from stocktrend.console import main


if __name__ == "__main__":
    # Use a robust relative path so the launcher works from any directory
    project_root = Path(__file__).resolve().parent
    sys.exit(main(["--config", str(project_root / 'config.yml')] + sys.argv[1:]))

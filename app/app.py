"""
Restaurant inspection analyser - console entry point.
"""

import sys
from pathlib import Path

# Add project root to path for package imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Load environment variables before the package reads its config
from dotenv import load_dotenv
load_dotenv()

from inspections.menu import main


if __name__ == "__main__":
    raise SystemExit(main())

# Fedora-macOS-Setup/install.py

import sys
from pathlib import Path

# Allow running from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).parent))

from macos_setup.main import run


if __name__ == "__main__":
    run()

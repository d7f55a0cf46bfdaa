#!/usr/bin/env python
"""
Quick launcher.

Usage:
    python run.py serve                      # WebSocket RPC server on $PORT (3000)
    python run.py serve --port 8080
    python run.py analyze "best camera tutorial" "hidden gem cameras" --niche tech
    python run.py analyze --file keywords.json --seed 42
    python run.py tools                      # Print the analyzeKeywords descriptor
"""

import os
import sys

# Add project root
sys.path.insert(0, os.path.dirname(__file__))

from yt_keyword_analyzer.cli import main

if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python
"""
Run script for Idea Lab.
Use: python run_app.py
Or: streamlit run idea_lab/ui/app.py
"""
import sys
import subprocess
from pathlib import Path


def main():
    """Run the Streamlit app."""
    app_path = Path(__file__).resolve().parent / "idea_lab" / "ui" / "app.py"
    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        str(app_path),
        "--server.port=8502",
        "--browser.gatherUsageStats=false",
    ])


if __name__ == "__main__":
    main()

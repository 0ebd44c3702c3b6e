"""
Launcher script for the YouTube to MP3 Streamlit app.
"""

import os
import argparse
import subprocess
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def main():
    """Launch the Streamlit app with command line options."""
    parser = argparse.ArgumentParser(description="YouTube to MP3 Streamlit App")
    parser.add_argument("--port", type=int, default=8501, help="Port to run Streamlit on")
    parser.add_argument("--production", action="store_true", help="Run with the production configuration")
    args = parser.parse_args()

    # Get the absolute path of the app directory
    app_dir = Path(__file__).parent.absolute()
    app_path = app_dir / "ytmp3" / "frontend" / "streamlit_app.py"

    env = os.environ.copy()
    if args.production:
        env["ENVIRONMENT"] = "production"

    # Add the project root to PYTHONPATH to fix import issues
    env["PYTHONPATH"] = str(app_dir) + os.pathsep + env.get("PYTHONPATH", "")

    missing = [name for name in ("RAPIDAPI_KEY", "RAPIDAPI_HOST") if not env.get(name)]
    if missing:
        print(f"Error: {', '.join(missing)} not set. Add them to .env or the environment.")
        sys.exit(1)

    print(f"Starting YouTube to MP3 Streamlit app on port {args.port}")
    print(f"Conversion API host: {env['RAPIDAPI_HOST']}")

    cmd = [
        "streamlit", "run", str(app_path),
        "--server.port", str(args.port),
        "--server.headless", "true",
        "--browser.serverAddress", "localhost",
        "--browser.gatherUsageStats", "false",
    ]

    try:
        subprocess.run(cmd, env=env, check=True)
    except KeyboardInterrupt:
        print("Streamlit app stopped")
    except Exception as e:
        print(f"Error running Streamlit app: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

from pathlib import Path


# movie_booking/platform/constant/path.py -> repository root
PROJECT_ROOT = Path(__file__).resolve().parents[3]

LOG_DIR = PROJECT_ROOT / 'logs'

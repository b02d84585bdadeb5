import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from services import admin as admin_svc
from utils.logging_setup import configure_logging

if __name__ == '__main__':
    configure_logging()
    counts = admin_svc.seed_sample_content()
    print("Seeded sample content: " + ", ".join(f"{k}={v}" for k, v in counts.items()))

import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "json" keeps data in DATA_FILE between runs, "memory" forgets it on exit.
STORE_BACKEND = os.getenv("STORE_BACKEND", "json")
DATA_FILE = os.getenv("DATA_FILE", "instance/school_data.json")

# Seed the demo school when the store is empty.
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))
SEED_DAYS = int(os.getenv("SEED_DAYS", "34"))

REPORT_WINDOW_DAYS = int(os.getenv("REPORT_WINDOW_DAYS", "30"))

import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STORE_BACKEND = os.getenv("STORE_BACKEND", "json")
DATA_FILE = os.getenv("DATA_FILE", "instance/school_data.json")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))
SEED_DAYS = int(os.getenv("SEED_DAYS", "34"))

REPORT_WINDOW_DAYS = int(os.getenv("REPORT_WINDOW_DAYS", "30"))

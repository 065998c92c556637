SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORE_BACKEND = "memory"
DATA_FILE = ""

SEED_DEMO_DATA = True
SEED_DAYS = 10

REPORT_WINDOW_DAYS = 30

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "learning_hr_test",
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

RECORD_STORE = "memory"
AUTO_INIT_DB = False

BUNNY_STORAGE_HOSTNAME = ""
UPLOAD_TIMEOUT_SECONDS = 30

NETWORK_SOURCE = "request"
TRUSTED_PROXY_COUNT = 0

import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "learning_hr"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "mysql" hoặc "memory"
RECORD_STORE = os.getenv("RECORD_STORE", "mysql")
# Tạo bảng documents khi khởi động (CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Để trống BUNNY_STORAGE_HOSTNAME thì ảnh được giữ trong bộ nhớ
BUNNY_STORAGE_HOSTNAME = os.getenv("BUNNY_STORAGE_HOSTNAME", "")
BUNNY_STORAGE_ZONE = os.getenv("BUNNY_STORAGE_ZONE", "")
BUNNY_STORAGE_PASSWORD = os.getenv("BUNNY_STORAGE_PASSWORD", "")
BUNNY_CDN_URL = os.getenv("BUNNY_CDN_URL", "")
UPLOAD_TIMEOUT_SECONDS = int(os.getenv("UPLOAD_TIMEOUT_SECONDS", "30"))

# "request": địa chỉ của client gửi request, "ipify": địa chỉ public của máy chủ
NETWORK_SOURCE = os.getenv("NETWORK_SOURCE", "request")
# Số reverse proxy tin cậy đứng trước app (0: dùng thẳng địa chỉ socket)
TRUSTED_PROXY_COUNT = int(os.getenv("TRUSTED_PROXY_COUNT", "0"))
IP_LOOKUP_URL = os.getenv("IP_LOOKUP_URL", "https://api.ipify.org?format=json")

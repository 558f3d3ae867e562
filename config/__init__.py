import os

def get_settings_module() -> str:
    # Lấy giá trị môi trường từ biến APP_ENV, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    # Testing chạy hoàn toàn trong bộ nhớ
    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"
